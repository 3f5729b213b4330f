# updates/exceptions.py
import logging

from django.conf import settings
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def internal_error_body(exc=None) -> dict:
    return {
        "error": "Internal server error",
        "message": str(exc) if settings.DEBUG and exc is not None else "Something went wrong",
    }


def api_exception_handler(exc, context):
    """
    DRF exception handler that answers with ``{"error": ...}`` bodies.

    Unhandled exceptions are logged and turned into a 500; the message is
    only revealed when DEBUG is on.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Server error in %s: %s", view.__class__.__name__ if view else None, exc)
        return Response(internal_error_body(exc), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.Throttled):
        response.data = {"error": "Too many update check requests"}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {"error": "Invalid request", "details": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": response.data["detail"]}
    return response
