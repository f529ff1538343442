# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Special hours data access.
Keeps every special entry written for a day, in write order.
"""

from schedule_store.models.domain import SpecialScheduleEntry


class SpecialHoursRepository:
    """In-memory special hours storage (day number -> list of entries)."""

    def __init__(self) -> None:
        self._store: dict[int, list[SpecialScheduleEntry]] = {}
        self._total = 0

    # ── Read ──

    def get(self, day: int) -> list[SpecialScheduleEntry]:
        """Copies of the day's entries; empty when there are none."""
        return [dict(entry) for entry in self._store.get(day, [])]

    def exists(self, day: int) -> bool:
        return day in self._store

    def count(self) -> int:
        """Total entries across all days."""
        return self._total

    # ── Write ──

    def append(self, day: int, entry: SpecialScheduleEntry) -> None:
        self._store.setdefault(day, []).append(entry)
        self._total += 1
