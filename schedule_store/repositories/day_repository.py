# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Standard schedule data access.
One entry per day key; saving a day replaces whatever it held.
NO business rules here — pure CRUD.
"""

from typing import Optional

from schedule_store.models.domain import ScheduleEntry


class DayScheduleRepository:
    """In-memory standard schedule storage keyed by day number."""

    def __init__(self) -> None:
        self._store: dict[int, ScheduleEntry] = {}

    # ── Read ──

    def get(self, day: int) -> Optional[ScheduleEntry]:
        """Return a copy of the day's entry, never the stored dict."""
        entry = self._store.get(day)
        return dict(entry) if entry is not None else None

    def exists(self, day: int) -> bool:
        return day in self._store

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def save(self, day: int, entry: ScheduleEntry) -> None:
        self._store[day] = entry
