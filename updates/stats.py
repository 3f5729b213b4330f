# updates/stats.py
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from django.utils import timezone

logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


def uptime() -> float:
    """Seconds since this process imported the module."""
    return time.monotonic() - _STARTED_AT


def _today() -> str:
    return timezone.localdate().isoformat()


@dataclass(frozen=True)
class StatsSnapshot:
    total_checks: int
    checks_today: int
    last_reset_day: str
    # (version, count), most reported first
    version_distribution: Tuple[Tuple[str, int], ...]


class UpdateStatsTracker:
    """
    In-process counters for update checks.

    Nothing here is persisted; a restart starts from zero. All reads and
    writes go through one lock so that the reset-then-increment sequence of
    a check is never interleaved with another one.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._total_checks = 0
        self._checks_today = 0
        self._last_reset_day = _today()
        self._version_counts: Dict[str, int] = {}

    def _reset_if_new_day(self) -> None:
        today = _today()
        if self._last_reset_day != today:
            self._checks_today = 0
            self._last_reset_day = today
            logger.info("Daily update check stats reset")

    def maybe_reset_daily(self) -> None:
        with self._lock:
            self._reset_if_new_day()

    def record_check(self, reported_version: Optional[str] = None) -> None:
        with self._lock:
            self._reset_if_new_day()
            self._total_checks += 1
            self._checks_today += 1
            if reported_version is not None:
                self._version_counts[reported_version] = self._version_counts.get(reported_version, 0) + 1

    def snapshot(self) -> StatsSnapshot:
        with self._lock:
            distribution = sorted(self._version_counts.items(), key=lambda item: (-item[1], item[0]))
            return StatsSnapshot(
                total_checks=self._total_checks,
                checks_today=self._checks_today,
                last_reset_day=self._last_reset_day,
                version_distribution=tuple(distribution),
            )


# process-wide tracker shared by all request handlers
update_stats = UpdateStatsTracker()
