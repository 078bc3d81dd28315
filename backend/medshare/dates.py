"""Date helpers shared by inventory status derivation and matching."""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional

ONE_DAY = timedelta(days=1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_until(expiry_date: datetime, now: Optional[datetime] = None) -> int:
    """Whole days from ``now`` until ``expiry_date``, rounded up.

    A partial day counts as a full remaining day, so stock expiring in
    two hours reports 1 and stock that expired two hours ago reports 0.
    Already expired stock yields zero or a negative number.
    """
    now = ensure_utc(now or utcnow())
    return math.ceil((ensure_utc(expiry_date) - now) / ONE_DAY)
