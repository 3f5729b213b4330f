# updates/records.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class VersionRecord:
    """Published release metadata of one application."""

    app: str
    latest_version: str
    minimum_version: str
    release_date: Optional[datetime] = None
    download_url: str = ""
    release_notes: Tuple[str, ...] = ()
    critical: bool = False
    changelog: Optional[str] = None


@dataclass(frozen=True)
class Decision:
    """Outcome of one update check."""

    update_available: bool
    critical: bool
    current_version: str
    latest_version: str
    minimum_version: str
    release_date: Optional[datetime] = None
    # only set when update_available
    download_url: Optional[str] = None
    release_notes: Optional[Tuple[str, ...]] = None
    changelog: Optional[str] = None
    platform: str = "unknown"
    arch: str = "unknown"
    checked_at: Optional[datetime] = field(default=None, compare=False)
