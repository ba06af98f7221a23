"""Date and time normalization for event schedules.

Dates are stored as ``YYYY-MM-DD`` and times as 24-hour ``HH:MM``. Free text
goes through ``dateutil``; times accept only the two clock patterns below.
"""

import re
from datetime import datetime, timezone

from dateutil import parser as dtp

from bookings.domain.errors import (
    InvalidDateError,
    InvalidTimeFormatError,
    InvalidTimeValueError,
)

_TWELVE_HOUR = re.compile(r"([0-9]{1,2}):([0-9]{2})\s?([AaPp][Mm])")
_TWENTY_FOUR_HOUR = re.compile(r"([0-9]{1,2}):([0-9]{2})")

# Two unrelated defaults: a field missing from the input shows up as a
# difference between the two parses.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _parse(text: str, default: datetime) -> datetime:
    parsed = dtp.parse(text, default=default)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed


def normalize_date(value: str) -> str:
    """Parse a loosely formatted date into ``YYYY-MM-DD``.

    Accepts ISO dates with or without a time and zone suffix, ``Month D, YYYY``
    and ``MM/DD/YYYY`` among others. Zone-aware input is converted to UTC
    before the time is dropped.

    Raises:
        InvalidDateError: If the input does not name a full calendar date.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value)

    text = value.strip()
    try:
        first, second = (_parse(text, default) for default in _DEFAULTS)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc

    if first.date() != second.date():
        raise InvalidDateError(value)
    return first.date().isoformat()


def normalize_time(value: str) -> str:
    """Convert a 12- or 24-hour clock time into 24-hour ``HH:MM``.

    Raises:
        InvalidTimeFormatError: If the input matches neither clock pattern.
        InvalidTimeValueError: If the hour or minute is out of range.
    """
    if not isinstance(value, str):
        raise InvalidTimeFormatError(value)

    text = value.strip()
    if match := _TWELVE_HOUR.fullmatch(text):
        hour, minute = int(match.group(1)), int(match.group(2))
        if not 1 <= hour <= 12 or not 0 <= minute <= 59:
            raise InvalidTimeValueError(value)
        if match.group(3).upper() == "PM":
            if hour != 12:
                hour += 12
        elif hour == 12:
            hour = 0
    elif match := _TWENTY_FOUR_HOUR.fullmatch(text):
        hour, minute = int(match.group(1)), int(match.group(2))
        if not 0 <= hour <= 23 or not 0 <= minute <= 59:
            raise InvalidTimeValueError(value)
    else:
        raise InvalidTimeFormatError(value)

    return f"{hour:02d}:{minute:02d}"
