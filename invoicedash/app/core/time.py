"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def utc_today_iso() -> str:
    """Return today's UTC calendar date as YYYY-MM-DD."""
    return utc_now().date().isoformat()
