# updates/fingerprint.py
"""
Stateless client fingerprint.

A SHA-256 digest over a few request attributes that lets us roughly tell
repeated checks from the same client apart in logs. Anyone controlling the
request headers can forge it: never use it for authentication or
authorization.
"""
from __future__ import annotations

import hashlib
from typing import Iterable, List, Optional

SEPARATOR = "|"


def fingerprint(attributes: Iterable[Optional[str]]) -> str:
    """Hash the present attributes (None is skipped, "" is kept) in the given order."""
    present = [value for value in attributes if value is not None]
    return hashlib.sha256(SEPARATOR.join(present).encode("utf-8")).hexdigest()


def _first_forwarded(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.split(",")[0].strip()


def request_attributes(meta) -> List[Optional[str]]:
    return [
        meta.get("REMOTE_ADDR"),
        meta.get("HTTP_USER_AGENT"),
        meta.get("HTTP_ACCEPT_LANGUAGE"),
        meta.get("HTTP_ACCEPT_ENCODING"),
        _first_forwarded(meta.get("HTTP_X_FORWARDED_FOR")),
        meta.get("HTTP_SEC_CH_UA_PLATFORM"),
    ]


def request_fingerprint(request) -> str:
    return fingerprint(request_attributes(request.META))
