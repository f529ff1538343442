# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Timestamp normalization — pure computation, no storage.
Turns datetimes, dates and strings into offset-aware datetimes and
buckets them into local calendar day keys.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Iterator, Optional

from schedule_store.core.logging import get_logger
from schedule_store.metrics.prometheus import INVALID_INPUTS

logger = get_logger(__name__)

ISO_DATE_FORMAT = "%Y-%m-%d"
EPOCH = datetime(1970, 1, 1)
ONE_DAY = timedelta(days=1)


def parse_date_time(
    value: Any,
    field: str,
    *,
    time_format: str,
    date_format: str,
    tz: tzinfo,
) -> Optional[datetime]:
    """
    Normalize `value` into an offset-aware datetime.

    Offset-aware datetimes are returned as-is. Offset-less datetimes, dates
    and strings without an offset are read as wall-clock time in `tz`.
    Strings are tried as ISO-8601 first, then against `time_format`,
    `date_format` and finally plain YYYY-MM-DD.

    Returns None (and logs the offending field) when nothing matches.
    Never raises.
    """
    if isinstance(value, datetime):
        if value.utcoffset() is not None:
            return value
        return value.replace(tzinfo=tz)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=tz)

    if isinstance(value, str):
        parsed = _parse_string(value.strip(), (time_format, date_format, ISO_DATE_FORMAT))
        if parsed is not None:
            return parsed if parsed.utcoffset() is not None else parsed.replace(tzinfo=tz)

    INVALID_INPUTS.labels(field=field).inc()
    logger.warning("Invalid schedule %s: %r", field, value, extra={"field": field})
    return None


def _parse_string(raw: str, patterns: tuple[str, ...]) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        pass
    for pattern in patterns:
        try:
            return datetime.strptime(raw, pattern)
        except ValueError:
            continue
    return None


def date_to_day(value: datetime) -> int:
    """
    Whole local calendar days since 1970-01-01.

    Counted on the value's own wall clock (epoch seconds shifted by its
    full UTC offset, seconds included), so the same instant written with
    two offsets can land on two different days. Offset-less values count
    as UTC wall-clock time.
    """
    return (value.replace(tzinfo=None) - EPOCH).days


def on_date(value: datetime, day: datetime) -> datetime:
    """Move `value` onto the calendar date of `day`, keeping its time and zone."""
    return value.replace(year=day.year, month=day.month, day=day.day)


def iter_days(start: datetime, end: datetime) -> Iterator[datetime]:
    """Yield `start` moved onto each calendar date from start to end, inclusive."""
    first, last = start.date(), end.date()
    for offset in range((last - first).days + 1):
        current = first + timedelta(days=offset)
        yield start.replace(year=current.year, month=current.month, day=current.day)
