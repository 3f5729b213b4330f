import re

from django.test import RequestFactory

from updates.fingerprint import fingerprint, request_attributes, request_fingerprint
from updates.middleware import FingerprintMiddleware

BASE = ["10.0.0.1", "MyApp/1.0", "en-US", "gzip", "203.0.113.7", '"Windows"']


def test_fingerprint_is_deterministic_sha256_hex():
    digest = fingerprint(BASE)
    assert digest == fingerprint(list(BASE))
    assert re.fullmatch(r"[0-9a-f]{64}", digest)


def test_changing_any_attribute_changes_digest():
    digests = {fingerprint(BASE)}
    for i in range(len(BASE)):
        changed = list(BASE)
        changed[i] = changed[i] + "x"
        digests.add(fingerprint(changed))
    assert len(digests) == len(BASE) + 1


def test_missing_attributes_are_dropped_but_empty_ones_kept():
    assert fingerprint(["a", None, "b"]) == fingerprint(["a", "b"])
    assert fingerprint(["a", "", "b"]) != fingerprint(["a", "b"])


def test_request_attributes_uses_first_forwarded_address():
    request = RequestFactory().get(
        "/api/apps",
        HTTP_USER_AGENT="MyApp/1.0",
        HTTP_X_FORWARDED_FOR="203.0.113.7, 10.0.0.2",
    )
    attrs = request_attributes(request.META)
    assert attrs[0] == "127.0.0.1"
    assert attrs[1] == "MyApp/1.0"
    assert attrs[4] == "203.0.113.7"
    assert attrs[2] is None and attrs[5] is None


def test_middleware_attaches_fingerprint():
    request = RequestFactory().get("/health", HTTP_USER_AGENT="MyApp/1.0")
    seen = {}

    def get_response(req):
        seen["id"] = req.client_fingerprint
        return "ok"

    assert FingerprintMiddleware(get_response)(request) == "ok"
    assert seen["id"] == request_fingerprint(request)
