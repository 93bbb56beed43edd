"""Date helpers for report headers and trend queries."""

from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Aware datetimes converted to UTC; naive ones are taken as UTC."""
    if moment.tzinfo is not None:
        return moment.astimezone(timezone.utc)
    return moment


def iso_date(moment: datetime) -> str:
    """YYYY-MM-DD in UTC."""
    return as_utc(moment).strftime("%Y-%m-%d")


def human_date(moment: datetime) -> str:
    """Long US-style date in UTC, e.g. "October 19, 2026"."""
    moment = as_utc(moment)
    return f"{moment:%B} {moment.day}, {moment.year}"


def yesterday(now: Optional[datetime] = None) -> str:
    """The calendar day before ``now`` (UTC) as YYYY-MM-DD."""
    now = now or utc_now()
    return iso_date(now - timedelta(days=1))
