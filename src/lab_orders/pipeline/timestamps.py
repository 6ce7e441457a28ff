"""Lenient timestamp parsing for backend records."""

import logging
from datetime import date, datetime, time, timezone

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

_datetime_adapter = TypeAdapter(datetime)
_date_adapter = TypeAdapter(date)


def _is_numeric(value: str) -> bool:
    """Whether ``value`` is a bare number rather than a date."""
    try:
        float(value)
    except ValueError:
        return False
    return True


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse a backend timestamp into an aware datetime.

    Returns None for missing or unparseable values. Naive values are taken
    as UTC so that every parsed timestamp can be compared with every other.
    Bare numbers are not timestamps.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif _is_numeric(value):
        return None
    else:
        try:
            parsed = _datetime_adapter.validate_python(value)
        except ValidationError:
            try:
                parsed = datetime.combine(_date_adapter.validate_python(value), time.min)
            except ValidationError:
                return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_key(value: str | datetime | None) -> datetime:
    """Timestamp for ordering; malformed values sort as the earliest moment."""
    parsed = parse_timestamp(value)
    if parsed is None:
        if value not in (None, ""):
            logger.warning("Unparseable timestamp %r, sorting it last", value)
        return EARLIEST
    return parsed


def format_date(value: str | datetime | None, fmt: str, default: str = "--") -> str:
    """Date-only rendering of a timestamp."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return default
    return parsed.strftime(fmt)
