# campus_energy/core/clock.py

from datetime import datetime, timezone
from typing import Callable, Optional

# A clock returns the current instant as a timezone-aware UTC datetime.
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """Clock that always answers `instant` (naive values are taken as UTC)."""
    instant = as_utc(instant)
    return lambda: instant


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
