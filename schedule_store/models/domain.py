# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from typing import NotRequired, TypedDict

STATUS_OPERATING = "Operating"
STATUS_CLOSED = "Closed"

# Only these may label a standard entry, and special entries may never use them
STANDARD_STATUSES: tuple[str, ...] = (STATUS_OPERATING, STATUS_CLOSED)


class SpecialScheduleEntry(TypedDict):
    """A supplementary schedule for a day (e.g. an extended-hours event)."""
    opening_time: str
    closing_time: str
    type: str


class ScheduleEntry(TypedDict):
    """The standard Operating/Closed schedule for a day."""
    date: str
    opening_time: str
    closing_time: str
    type: str
    special: NotRequired[list[SpecialScheduleEntry]]
