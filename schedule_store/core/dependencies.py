# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the schedule store.
"""

from schedule_store.metrics.prometheus import DAYS_STORED, SPECIAL_ENTRIES_STORED
from schedule_store.services.schedule_store import ScheduleStore

# ── Singleton store instance (in-memory) ──
_schedule_store = ScheduleStore()

# Stored-entry gauges describe the service's own store, read at scrape time
DAYS_STORED.set_function(_schedule_store.day_count)
SPECIAL_ENTRIES_STORED.set_function(_schedule_store.special_entry_count)


# ── FastAPI dependency functions ──
def get_schedule_store() -> ScheduleStore:
    return _schedule_store
