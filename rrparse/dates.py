"""Calendar timestamp decoding for recurrence property values."""

import re
from datetime import datetime, timezone

from .errors import InvalidDateFormatError

_TIMESTAMP_SHAPE = re.compile(r"\d{8}(T\d{6}Z?)?")
_DTSTART_PREFIX = re.compile(r"DTSTART(?:;[^:]*)?:", re.IGNORECASE)


def parse_timestamp(dt_string: str) -> datetime:
    """
    Parse an iCal date or date-time string into a datetime.

    Supports:
    - YYYYMMDDTHHMMSSZ (UTC, returned timezone-aware)
    - YYYYMMDDTHHMMSS (floating, returned naive)
    - YYYYMMDD (date only, returned as naive midnight)

    A ``DTSTART`` property prefix such as ``DTSTART;TZID=Europe/Paris:`` is
    ignored; any other text before the timestamp is an error.

    Args:
        dt_string: iCal timestamp, optionally with its DTSTART prefix

    Returns:
        Parsed datetime

    Raises:
        InvalidDateFormatError: If the text is not one of the forms above
            or names an impossible date
    """
    if not dt_string or not isinstance(dt_string, str):
        raise InvalidDateFormatError(dt_string)

    value = dt_string.strip()
    prefix = _DTSTART_PREFIX.match(value)
    if prefix:
        value = value[prefix.end() :]

    if not _TIMESTAMP_SHAPE.fullmatch(value):
        raise InvalidDateFormatError(dt_string)

    formats: list[tuple[str, bool]] = [
        ("%Y%m%dT%H%M%SZ", True),
        ("%Y%m%dT%H%M%S", False),
        ("%Y%m%d", False),
    ]
    for fmt, is_utc in formats:
        try:
            dt = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if is_utc:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    raise InvalidDateFormatError(dt_string)


def parse_timestamp_list(value: str) -> list[datetime]:
    """
    Parse a comma-separated RDATE/EXDATE value.

    Args:
        value: One or more timestamps separated by commas

    Returns:
        Timestamps in the order they appear
    """
    return [parse_timestamp(part) for part in value.split(",")]
