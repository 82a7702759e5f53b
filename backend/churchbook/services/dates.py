"""Timestamp helpers - documents store ISO-8601 strings, UTC."""
from datetime import datetime, timezone
from typing import Optional

import pytz

from churchbook.config import settings


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_timestamp(value) -> Optional[datetime]:
    """Parse a stored timestamp; naive values are taken as UTC. Returns None if unparseable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(str(value))
        except ValueError:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_display_date(value) -> Optional[str]:
    """`Nov 02, 2026` in the configured display time zone, or None."""
    dt = parse_timestamp(value)
    if dt is None:
        return None
    local = dt.astimezone(pytz.timezone(settings.DISPLAY_TIMEZONE))
    return local.strftime("%b %d, %Y")
