# updates/versioning.py
"""
Loose version comparison used by update checks.

Versions are split on "." and "-" and every segment is read by its leading
digits ("3b" is 3). Segments without leading digits ("beta", "rc1", "")
count as 0, so "1.0.0-beta" and "1.0.0" compare equal. Clients in the field
rely on this ordering, keep it as is.
"""
from __future__ import annotations

import re
from typing import List

_SEPARATORS = re.compile(r"[.-]")
_LEADING_DIGITS = re.compile(r"\s*\+?([0-9]+)")


def _to_int(segment: str) -> int:
    # leading digits count ("3b" -> 3), anything else is 0
    match = _LEADING_DIGITS.match(segment)
    return int(match.group(1)) if match else 0


def parse_version(version: str) -> List[int]:
    """"1.10.0-beta.2" -> [1, 10, 0, 0, 2]"""
    return [_to_int(part) for part in _SEPARATORS.split(version)]


def compare_versions(a: str, b: str) -> int:
    """
    Compare two version strings.

    Returns -1 when a < b, 0 when they are equal and 1 when a > b.
    Never raises for malformed input.
    """
    left = parse_version(a)
    right = parse_version(b)
    size = max(len(left), len(right))
    left += [0] * (size - len(left))
    right += [0] * (size - len(right))

    for x, y in zip(left, right):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0
