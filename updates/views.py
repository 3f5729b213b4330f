# updates/views.py
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

import updateserver

from . import stats
from .errors import MissingVersionError, NotFoundError
from .exceptions import internal_error_body
from .permissions import HasAdminKey, HasWebhookSecret
from .serializers import (
    AppSummarySerializer,
    DecisionSerializer,
    PublishSerializer,
    UpdateCheckQuerySerializer,
    VersionInfoSerializer,
    WebhookReleaseSerializer,
)
from .services import check_for_update
from .stores import get_version_store
from .throttling import UpdateCheckRateThrottle

logger = logging.getLogger(__name__)

CHECK_EXAMPLE = "/api/updates/check?app=myapp&version=1.0.0"

AVAILABLE_ENDPOINTS = [
    "GET /api/updates/check?app=myapp&version=1.0.0",
    "GET /api/version/myapp",
    "GET /api/apps",
    "GET /health",
    "POST /api/admin/publish",
    "GET /api/admin/stats",
    "POST /api/webhook/release",
]


def _app_not_found(store):
    return Response(
        {"error": "Application not found", "availableApps": store.app_names()},
        status=status.HTTP_404_NOT_FOUND,
    )


class UpdateCheckView(APIView):
    """
    Tell a client whether a newer release of its application exists.

    Query: app (defaults to DEFAULT_APP_NAME), version, platform, arch.
    """
    permission_classes = [AllowAny]
    throttle_classes = [UpdateCheckRateThrottle]

    def get(self, request):
        query = UpdateCheckQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        app_name = params.get("app") or settings.DEFAULT_APP_NAME
        # "?version=" is the same as no version at all
        version = params.get("version") or None
        store = get_version_store()

        try:
            decision = check_for_update(
                app_name,
                version,
                store,
                platform=params.get("platform") or None,
                arch=params.get("arch") or None,
                client_id=getattr(request, "client_fingerprint", None),
            )
        except NotFoundError:
            return _app_not_found(store)
        except MissingVersionError:
            return Response(
                {"error": "Current version is required", "example": CHECK_EXAMPLE},
                status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(DecisionSerializer(decision).data, status=status.HTTP_200_OK)


class VersionInfoView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, app):
        store = get_version_store()
        record = store.find_by_app(app)
        if record is None:
            return _app_not_found(store)
        return Response(VersionInfoSerializer(record).data)


class AppListView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        records = get_version_store().list_records()
        return Response({"apps": AppSummarySerializer(records, many=True).data})


class PublishVersionView(APIView):
    """Admin: publish a new release for an application."""
    permission_classes = [HasAdminKey]

    def post(self, request):
        serializer = PublishSerializer(data=request.data)
        if not serializer.is_valid():
            message = "Version is required" if "version" in serializer.errors else "Invalid release"
            return Response({"error": message, "details": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        app_name = data.get("app") or settings.DEFAULT_APP_NAME
        version = data["version"]
        record, previous = get_version_store().publish(
            app_name,
            version,
            download_url=data.get("download_url") or None,
            release_notes=data.get("release_notes"),
            critical=data.get("critical", False),
            minimum_version=data.get("minimum_version") or None,
            changelog=data.get("changelog") or None,
        )
        return Response({
            "success": True,
            "message": f"Version {version} published for {app_name}",
            "publishedAt": record.release_date.isoformat(),
            "previousVersion": previous,
        })


class StatsView(APIView):
    """Admin: check counters and the reported version distribution."""
    permission_classes = [HasAdminKey]

    def get(self, request):
        tracker = stats.update_stats
        tracker.maybe_reset_daily()
        snap = tracker.snapshot()
        return Response({
            "totalChecks": snap.total_checks,
            "checksToday": snap.checks_today,
            "lastReset": snap.last_reset_day,
            "versionDistribution": [
                {"version": version, "count": count} for version, count in snap.version_distribution
            ],
            "availableApps": get_version_store().app_names(),
            "uptime": stats.uptime(),
        })


class WebhookReleaseView(APIView):
    """CI hook: move a known application to a freshly built release."""
    permission_classes = [HasWebhookSecret]

    def post(self, request):
        serializer = WebhookReleaseSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "Version is required", "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        data = serializer.validated_data
        app_name = (data.get("repository") or {}).get("name") or settings.DEFAULT_APP_NAME
        version = data["version"]
        record = get_version_store().apply_release(
            app_name,
            version,
            download_url=data.get("download_url") or None,
            release_notes=data.get("release_notes"),
        )
        if record is None:
            return Response({"error": "App not found"}, status=status.HTTP_404_NOT_FOUND)

        return Response({
            "success": True,
            "message": f"Version {version} updated via webhook",
            "app": app_name,
        })


class HealthView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "uptime": stats.uptime(),
            "version": updateserver.__version__,
        })


def endpoint_not_found(request, exception=None):
    return JsonResponse(
        {"error": "Endpoint not found", "availableEndpoints": AVAILABLE_ENDPOINTS},
        status=404,
    )


def server_error(request):
    return JsonResponse(internal_error_body(), status=500)
