"""Module: dates."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import settings

INVALID_DATE = "Invalid Date"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_timestamp(value: str | datetime) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    else:
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None

    # Stored timestamps are UTC; naive values are read the same way.
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _display_zone(tz_name: str | None):
    name = tz_name or settings.display_timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return UTC


def format_display_date(timestamp: str | datetime, tz_name: str | None = None) -> str:
    """Render a timestamp as e.g. ``"January 5, 2025, 3:45 PM"``."""
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return INVALID_DATE

    try:
        local = parsed.astimezone(_display_zone(tz_name))
    except (OverflowError, ValueError):
        return INVALID_DATE
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{MONTH_NAMES[local.month - 1]} {local.day}, {local.year}, "
        f"{hour}:{local.minute:02d} {meridiem}"
    )


def to_iso(value: datetime) -> str:
    # ISO 8601 in UTC with millisecond precision and a trailing "Z".
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
