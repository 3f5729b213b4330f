# updates/stores.py
"""
Where published version records live.

Two interchangeable backends: ``ModelVersionStore`` keeps records in the
database through the ``AppVersion`` model, ``InMemoryVersionStore`` keeps
them in a dict for the lifetime of the process. The backend is picked by
``settings.VERSION_STORE``.
"""
from __future__ import annotations

import contextlib
import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone as dt_timezone
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from django.utils.module_loading import import_string

from .records import VersionRecord

logger = logging.getLogger(__name__)

DEFAULT_RELEASES = (
    VersionRecord(
        app="myapp",
        latest_version="1.2.0",
        minimum_version="1.0.0",
        release_date=datetime(2024, 12, 1, 10, 0, tzinfo=dt_timezone.utc),
        download_url="https://releases.myapp.com/v1.2.0",
        release_notes=(
            "Added dark mode support",
            "Fixed memory leak in background sync",
            "Improved performance by 30%",
            "Security updates",
        ),
        critical=False,
        changelog="https://myapp.com/changelog/v1.2.0",
    ),
    VersionRecord(
        app="myapp-beta",
        latest_version="1.3.0-beta.1",
        minimum_version="1.2.0",
        release_date=datetime(2024, 12, 15, 14, 30, tzinfo=dt_timezone.utc),
        download_url="https://releases.myapp.com/beta/v1.3.0-beta.1",
        release_notes=(
            "New experimental AI features",
            "Redesigned user interface",
            "Performance improvements",
        ),
        critical=False,
        changelog="https://myapp.com/changelog/v1.3.0-beta.1",
    ),
)


class VersionStore:
    """Base class; subclasses implement lookup and persistence."""

    def find_by_app(self, name: str) -> Optional[VersionRecord]:
        raise NotImplementedError

    def list_records(self) -> List[VersionRecord]:
        raise NotImplementedError

    def app_names(self) -> List[str]:
        return [record.app for record in self.list_records()]

    # --- write side -----------------------------------------------------------
    def _locked(self):
        return contextlib.nullcontext()

    def _find_for_update(self, name: str) -> Optional[VersionRecord]:
        return self.find_by_app(name)

    def _save(self, record: VersionRecord) -> None:
        raise NotImplementedError

    def publish(
        self,
        app: str,
        version: str,
        download_url: Optional[str] = None,
        release_notes: Optional[Iterable[str]] = None,
        critical: bool = False,
        minimum_version: Optional[str] = None,
        changelog: Optional[str] = None,
    ) -> Tuple[VersionRecord, Optional[str]]:
        """Publish ``version`` as the latest release of ``app``, creating the app if needed."""
        with self._locked():
            existing = self._find_for_update(app)
            previous = existing.latest_version if existing else None
            record = VersionRecord(
                app=app,
                latest_version=version,
                minimum_version=(
                    minimum_version
                    or (existing.minimum_version if existing else None)
                    or version
                ),
                release_date=timezone.now(),
                download_url=download_url or (existing.download_url if existing else ""),
                release_notes=(
                    tuple(release_notes) if release_notes is not None
                    else (f"Updated to version {version}",)
                ),
                critical=critical,
                changelog=changelog or (existing.changelog if existing else None),
            )
            self._save(record)

        logger.info("New version published for %s: %s -> %s", app, previous, version)
        return record, previous

    def apply_release(
        self,
        app: str,
        version: str,
        download_url: Optional[str] = None,
        release_notes: Optional[Iterable[str]] = None,
    ) -> Optional[VersionRecord]:
        """Release coming from CI. Only known apps are updated; returns None otherwise."""
        with self._locked():
            existing = self._find_for_update(app)
            if existing is None:
                return None
            record = replace(
                existing,
                latest_version=version,
                release_date=timezone.now(),
                download_url=download_url or existing.download_url,
                release_notes=(
                    tuple(release_notes) if release_notes is not None
                    else (f"Release {version}",)
                ),
            )
            self._save(record)

        logger.info("Webhook release update: %s -> %s", app, version)
        return record


class InMemoryVersionStore(VersionStore):
    """Dict-backed store; contents are lost on restart."""

    def __init__(self, records: Optional[Iterable[VersionRecord]] = None, seed: bool = True):
        if records is None:
            records = DEFAULT_RELEASES if seed else ()
        self._records: Dict[str, VersionRecord] = {r.app: r for r in records}
        self._lock = threading.RLock()

    def find_by_app(self, name):
        with self._lock:
            return self._records.get(name)

    def list_records(self):
        with self._lock:
            return list(self._records.values())

    def _locked(self):
        return self._lock

    def _save(self, record):
        self._records[record.app] = record


class ModelVersionStore(VersionStore):
    """Store backed by the ``AppVersion`` model."""

    def _model(self):
        from .models import AppVersion

        return AppVersion

    def find_by_app(self, name):
        row = self._model().objects.filter(app=name).first()
        return row.to_record() if row else None

    def list_records(self):
        return [row.to_record() for row in self._model().objects.order_by("app")]

    def _locked(self):
        return transaction.atomic()

    def _find_for_update(self, name):
        row = self._model().objects.select_for_update().filter(app=name).first()
        return row.to_record() if row else None

    def _save(self, record):
        self._model().objects.update_or_create(
            app=record.app,
            defaults={
                "latest_version": record.latest_version,
                "minimum_version": record.minimum_version,
                "release_date": record.release_date or timezone.now(),
                "download_url": record.download_url,
                "release_notes": list(record.release_notes),
                "critical": record.critical,
                "changelog": record.changelog,
            },
        )


@lru_cache(maxsize=None)
def get_version_store() -> VersionStore:
    """Configured store, built once per process."""
    config = getattr(settings, "VERSION_STORE", {}) or {}
    backend = import_string(config.get("BACKEND", "updates.stores.ModelVersionStore"))
    return backend(**config.get("OPTIONS", {}))
