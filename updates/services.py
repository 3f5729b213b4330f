# updates/services.py
from __future__ import annotations

import logging
from typing import Optional

from django.utils import timezone

from . import stats as stats_module
from .errors import MissingVersionError, NotFoundError
from .records import Decision, VersionRecord
from .stats import UpdateStatsTracker
from .versioning import compare_versions

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


class NegotiationEngine:
    """
    Decide whether a client should update.

    The caller looks the record up in a VersionStore and hands it over;
    the engine itself does no I/O besides recording the check in the stats
    tracker.
    """

    def __init__(self, stats: Optional[UpdateStatsTracker] = None):
        self._stats = stats

    @property
    def stats(self) -> UpdateStatsTracker:
        if self._stats is not None:
            return self._stats
        return stats_module.update_stats

    def negotiate(
        self,
        app_name: str,
        client_version: Optional[str],
        record: Optional[VersionRecord],
        platform: Optional[str] = None,
        arch: Optional[str] = None,
    ) -> Decision:
        if not app_name:
            raise ValueError("app_name is required")

        if record is None:
            raise NotFoundError(app_name)

        self.stats.record_check(client_version)

        if client_version is None:
            raise MissingVersionError(app_name)

        update_available = compare_versions(client_version, record.latest_version) < 0
        critical = record.critical and compare_versions(client_version, record.minimum_version) < 0

        if update_available:
            logger.info(
                "Update available for %s: %s -> %s", app_name, client_version, record.latest_version
            )

        return Decision(
            update_available=update_available,
            critical=critical,
            current_version=client_version,
            latest_version=record.latest_version,
            minimum_version=record.minimum_version,
            release_date=record.release_date,
            download_url=record.download_url if update_available else None,
            release_notes=tuple(record.release_notes) if update_available else None,
            changelog=record.changelog if update_available else None,
            platform=platform or UNKNOWN,
            arch=arch or UNKNOWN,
            checked_at=timezone.now(),
        )


def check_for_update(
    app_name: str,
    client_version: Optional[str],
    store,
    platform: Optional[str] = None,
    arch: Optional[str] = None,
    client_id: Optional[str] = None,
    engine: Optional[NegotiationEngine] = None,
) -> Decision:
    """Look the application up in ``store`` and negotiate."""
    logger.info(
        "Update check: app=%s, version=%s, platform=%s, client=%s",
        app_name, client_version, platform, client_id[:12] if client_id else None,
    )
    record = store.find_by_app(app_name)
    return (engine or NegotiationEngine()).negotiate(
        app_name, client_version, record, platform=platform, arch=arch
    )
