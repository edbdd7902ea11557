from datetime import datetime, timezone

from app.core.dates import INVALID_DATE, format_display_date, parse_timestamp, to_iso


def test_formats_iso_timestamp():
    assert format_display_date("2025-01-05T15:45:00.000Z") == "January 5, 2025, 3:45 PM"


def test_midnight_and_noon():
    assert format_display_date("2025-03-09T00:05:00Z") == "March 9, 2025, 12:05 AM"
    assert format_display_date("2025-03-09T12:00:00Z") == "March 9, 2025, 12:00 PM"


def test_offsets_are_converted_to_display_zone():
    assert format_display_date("2025-01-05T10:45:00-05:00") == "January 5, 2025, 3:45 PM"
    assert format_display_date("2025-01-05T15:45:00Z", tz_name="America/New_York") == "January 5, 2025, 10:45 AM"


def test_datetime_objects_are_accepted():
    assert format_display_date(datetime(2024, 12, 31, 23, 59)) == "December 31, 2024, 11:59 PM"


def test_malformed_input_returns_sentinel():
    assert format_display_date("not a date") == INVALID_DATE
    assert format_display_date("") == INVALID_DATE
    assert format_display_date(None) == INVALID_DATE
    assert format_display_date("2025-13-45T00:00:00Z") == INVALID_DATE


def test_unknown_timezone_falls_back_to_utc():
    assert format_display_date("2025-01-05T15:45:00Z", tz_name="Mars/Olympus") == "January 5, 2025, 3:45 PM"


def test_parse_timestamp_treats_naive_as_utc():
    parsed = parse_timestamp("2025-01-05T15:45:00")
    assert parsed.tzinfo is not None
    assert parsed.utcoffset().total_seconds() == 0


def test_to_iso_uses_millisecond_z_form():
    assert to_iso(datetime(2025, 1, 5, 15, 45, 0, 123456)) == "2025-01-05T15:45:00.123Z"
    assert to_iso(datetime(2025, 1, 5, 15, 45, tzinfo=timezone.utc)) == "2025-01-05T15:45:00.000Z"
