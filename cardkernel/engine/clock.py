"""Clock and calendar helpers. All local time questions go through a Clock."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from cardkernel.config import settings


class Clock(Protocol):
    def now(self) -> datetime:
        """Current instant as a timezone-aware local datetime."""
        ...


class SystemClock:
    """Wall clock in a fixed IANA zone (defaults to settings.default_tz)."""

    def __init__(self, tz_name: str | None = None):
        self.tz = ZoneInfo(tz_name or settings.default_tz)

    def now(self) -> datetime:
        return datetime.now(self.tz)


def local_date(clock: Clock) -> date:
    return clock.now().date()


def is_monday(moment: datetime) -> bool:
    return moment.weekday() == 0


def is_weekend(moment: datetime) -> bool:
    return moment.weekday() >= 5  # Sat=5, Sun=6
