# updates/throttling.py
import re

from rest_framework.throttling import SimpleRateThrottle

_PERIODS = {"s": 1, "m": 60, "h": 3600, "d": 86400}
_PERIOD_RE = re.compile(r"^(\d*)([smhd])")


class UpdateCheckRateThrottle(SimpleRateThrottle):
    """
    Per client address limit on update checks.

    Besides DRF's "10/min" style, accepts a period multiplier: "100/15m".
    """

    scope = "update_check"

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        num, period = rate.split("/")
        match = _PERIOD_RE.match(period)
        if not match:
            raise ValueError(f"Invalid throttle rate: {rate}")
        multiplier = int(match.group(1) or 1)
        return (int(num), multiplier * _PERIODS[match.group(2)])
