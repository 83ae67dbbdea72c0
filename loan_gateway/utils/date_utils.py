"""Date and time utilities"""

from datetime import datetime, timezone


class SystemClock:
    """Wall-clock time source, always timezone-aware UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant (useful for replays and tests)"""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
