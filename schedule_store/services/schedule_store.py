# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Schedule store — opening and closing times per calendar day.
Standard entries (Operating / Closed) are replaced on each write; special
entries (e.g. extended-hours events) accumulate per day.
"""

from datetime import datetime, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from schedule_store.core.config import settings
from schedule_store.core.logging import get_logger
from schedule_store.metrics.prometheus import (
    RANGE_WRITES,
    SCHEDULE_LOOKUPS,
    SCHEDULE_WRITES,
)
from schedule_store.models.domain import (
    STATUS_OPERATING,
    STANDARD_STATUSES,
    ScheduleEntry,
)
from schedule_store.repositories.day_repository import DayScheduleRepository
from schedule_store.repositories.special_hours_repository import SpecialHoursRepository
from schedule_store.services.timestamps import (
    ONE_DAY,
    date_to_day,
    iter_days,
    on_date,
    parse_date_time,
)

logger = get_logger(__name__)


class ScheduleStore:
    """
    Calendar-indexed store of standard and special opening hours.

    Every write is keyed by the local calendar day of its date, formatted
    once with the store's date and time patterns and kept for the lifetime
    of the store. Not thread-safe: callers must serialize access.
    """

    def __init__(
        self,
        date_format: Optional[str] = None,
        time_format: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> None:
        self._date_format = date_format or settings.DEFAULT_DATE_FORMAT
        self._time_format = time_format or settings.DEFAULT_TIME_FORMAT
        self._tz = ZoneInfo(timezone or settings.DEFAULT_TIMEZONE)
        self._days = DayScheduleRepository()
        self._special = SpecialHoursRepository()

    @property
    def date_format(self) -> str:
        return self._date_format

    @property
    def time_format(self) -> str:
        return self._time_format

    @property
    def timezone(self) -> tzinfo:
        return self._tz

    # ── Commands ──

    def set_date(
        self,
        date: Any = None,
        opening_time: Any = None,
        closing_time: Any = None,
        special_hours: bool = False,
        schedule_type: str = STATUS_OPERATING,
    ) -> bool:
        """
        Set schedule data for one day. `date` falls back to `opening_time`.

        Opening and closing times are moved onto `date`; a closing time
        earlier than the opening time belongs to the next day. Standard
        data must be typed "Operating" or "Closed" and replaces the day's
        entry. Special data may be typed anything else and is appended.

        Returns False (after logging why) without touching the store when
        any input is invalid.
        """
        kind = "special" if special_hours else "standard"
        if not date:
            date = opening_time

        day_date = self._parse(date, "date")
        opening = self._parse(opening_time, "opening_time")
        closing = self._parse(closing_time, "closing_time")
        if day_date is None or opening is None or closing is None:
            SCHEDULE_WRITES.labels(kind=kind, outcome="invalid_time").inc()
            return False

        day = date_to_day(day_date)
        opening = on_date(opening, day_date)
        closing = on_date(closing, day_date)
        try:
            if closing < opening:
                # open past midnight
                closing += ONE_DAY
        except OverflowError:
            logger.warning(
                "Closing time %s cannot roll past the last supported date",
                closing.isoformat(),
                extra={"field": "closing_time"},
            )
            SCHEDULE_WRITES.labels(kind=kind, outcome="invalid_time").inc()
            return False

        if not special_hours:
            if schedule_type not in STANDARD_STATUSES:
                logger.warning(
                    "Invalid schedule_type %r for standard schedule data (must be Operating or Closed)",
                    schedule_type,
                    extra={"field": "schedule_type"},
                )
                SCHEDULE_WRITES.labels(kind=kind, outcome="invalid_type").inc()
                return False
            self._days.save(day, {
                "date": day_date.strftime(self._date_format),
                "opening_time": opening.strftime(self._time_format),
                "closing_time": closing.strftime(self._time_format),
                "type": schedule_type,
            })
        else:
            if not isinstance(schedule_type, str) or schedule_type in STANDARD_STATUSES:
                logger.warning(
                    "Invalid schedule_type %r for special schedule data (can't be Operating or Closed)",
                    schedule_type,
                    extra={"field": "schedule_type"},
                )
                SCHEDULE_WRITES.labels(kind=kind, outcome="invalid_type").inc()
                return False
            self._special.append(day, {
                "opening_time": opening.strftime(self._time_format),
                "closing_time": closing.strftime(self._time_format),
                "type": schedule_type,
            })

        SCHEDULE_WRITES.labels(kind=kind, outcome="success").inc()
        logger.debug("Schedule set: day=%d, kind=%s, type=%s", day, kind, schedule_type)
        return True

    def set_range(
        self,
        start_date: Any = None,
        end_date: Any = None,
        opening_time: Any = None,
        closing_time: Any = None,
        special_hours: bool = False,
        schedule_type: str = STATUS_OPERATING,
    ) -> bool:
        """
        Apply the same schedule data to every day from start_date to
        end_date inclusive.

        Every day is attempted even after a failure, so all valid days are
        stored; the result is False if any single day was rejected.
        """
        start = self._parse(start_date, "start_date")
        end = self._parse(end_date, "end_date")
        opening = self._parse(opening_time, "opening_time")
        closing = self._parse(closing_time, "closing_time")
        if start is None or end is None or opening is None or closing is None:
            RANGE_WRITES.labels(outcome="invalid_time").inc()
            return False

        success = True
        attempted = failed = 0
        for day_date in iter_days(start, end):
            day_ok = self.set_date(
                date=day_date,
                opening_time=opening,
                closing_time=closing,
                special_hours=special_hours,
                schedule_type=schedule_type,
            )
            success = success and day_ok
            attempted += 1
            failed += 0 if day_ok else 1

        RANGE_WRITES.labels(outcome="success" if success else "partial").inc()
        logger.info("Schedule range set: days=%d, failed=%d", attempted, failed)
        return success

    # ── Queries ──

    def get_date(self, date: Any = None) -> Optional[ScheduleEntry]:
        """
        Schedule data for one day, or None when there is none.
        Special entries appear under "special" only if the day has any.
        """
        day_date = self._parse(date, "date")
        if day_date is None:
            SCHEDULE_LOOKUPS.labels(operation="date", result="invalid").inc()
            return None

        day = date_to_day(day_date)
        entry = self._days.get(day)
        if entry is None:
            SCHEDULE_LOOKUPS.labels(operation="date", result="miss").inc()
            return None

        if self._special.exists(day):
            entry["special"] = self._special.get(day)
        SCHEDULE_LOOKUPS.labels(operation="date", result="hit").inc()
        return entry

    def get_date_range(self, start_date: Any = None, end_date: Any = None) -> list[ScheduleEntry]:
        """Schedule data for each day in the range that has any, in date order."""
        start = self._parse(start_date, "start_date")
        end = self._parse(end_date, "end_date")
        if start is None or end is None:
            SCHEDULE_LOOKUPS.labels(operation="range", result="invalid").inc()
            return []

        results: list[ScheduleEntry] = []
        for day_date in iter_days(start, end):
            entry = self.get_date(date=day_date)
            if entry is not None:
                results.append(entry)

        SCHEDULE_LOOKUPS.labels(operation="range", result="hit" if results else "miss").inc()
        return results

    # ── Stats helpers ──

    def day_count(self) -> int:
        return self._days.count()

    def special_entry_count(self) -> int:
        return self._special.count()

    # ── Internal ──

    def _parse(self, value: Any, field: str) -> Optional[datetime]:
        return parse_date_time(
            value,
            field,
            time_format=self._time_format,
            date_format=self._date_format,
            tz=self._tz,
        )
