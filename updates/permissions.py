# updates/permissions.py
import hmac

from django.conf import settings
from rest_framework import exceptions
from rest_framework.permissions import BasePermission


class Unauthorized(exceptions.APIException):
    status_code = 401
    default_detail = "Unauthorized"
    default_code = "unauthorized"


def _matches(provided, expected) -> bool:
    # an unset secret locks the endpoint
    if not expected or provided is None:
        return False
    return hmac.compare_digest(str(provided).encode("utf-8"), str(expected).encode("utf-8"))


class HasAdminKey(BasePermission):
    """Static shared key in the X-Admin-Key header."""

    def has_permission(self, request, view):
        if not _matches(request.headers.get("X-Admin-Key"), getattr(settings, "ADMIN_KEY", None)):
            raise Unauthorized()
        return True


class HasWebhookSecret(BasePermission):
    def has_permission(self, request, view):
        if not _matches(request.headers.get("X-Webhook-Secret"), getattr(settings, "WEBHOOK_SECRET", None)):
            raise Unauthorized("Invalid webhook secret")
        return True
