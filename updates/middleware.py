# updates/middleware.py
from .fingerprint import request_fingerprint


class FingerprintMiddleware:
    """Attach ``client_fingerprint`` to every request (logging/attribution only)."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.client_fingerprint = request_fingerprint(request)
        return self.get_response(request)
