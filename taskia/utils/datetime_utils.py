"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in taskia.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- ensure_aware(): Treat naive values read back from MongoDB as UTC
- date_to_iso() / parse_date(): Convert values stored as strings
"""
import logging
import zoneinfo
from datetime import date, datetime, timezone as dt_timezone
from typing import Optional

from taskia.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> dt_timezone:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def today() -> date:
    """Get the current date in the application timezone."""
    return now().date()


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Make a datetime timezone-aware.

    pymongo hands back naive UTC datetimes unless the client is tz_aware,
    so naive values are treated as UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt


def date_to_iso(value: Optional[date]) -> Optional[str]:
    """
    Convert a calendar date to its ISO 8601 string ("YYYY-MM-DD").

    Returns:
        ISO 8601 formatted string, or None if value is None
    """
    if value is None:
        return None
    return value.isoformat()


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Parse an ISO 8601 date string ("YYYY-MM-DD") stored in MongoDB.

    BSON has no date-only type, so calendar dates are persisted as strings.
    """
    if not value:
        return None
    return date.fromisoformat(value[:10])
