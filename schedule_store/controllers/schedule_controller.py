# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Schedule endpoints.
Thin HTTP layer — delegates ALL logic to ScheduleStore.

Handlers are async so they all run on the event loop thread, which keeps
access to the (unsynchronized) store serialized.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from schedule_store.core.dependencies import get_schedule_store
from schedule_store.schemas.schedule import (
    ScheduleResponse,
    SetDateRequest,
    SetRangeRequest,
    WriteResponse,
)
from schedule_store.services.schedule_store import ScheduleStore

router = APIRouter(prefix="/api/v1", tags=["Schedule"])


@router.post("/schedule/dates", status_code=201, response_model=WriteResponse)
async def set_date(
    payload: SetDateRequest,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Set standard or special schedule data for one day."""
    if not store.set_date(**payload.model_dump()):
        raise HTTPException(
            status_code=400,
            detail="Schedule data rejected: invalid time or schedule_type for this kind of entry",
        )
    return {"success": True}


@router.post("/schedule/ranges", status_code=201, response_model=WriteResponse)
async def set_range(
    payload: SetRangeRequest,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Apply the same schedule data to every day of a date range."""
    if not store.set_range(**payload.model_dump()):
        raise HTTPException(
            status_code=400,
            detail="Schedule range rejected: no day or only some days were stored",
        )
    return {"success": True}


@router.get(
    "/schedule/dates/{date}",
    response_model=ScheduleResponse,
    response_model_exclude_none=True,
)
async def get_date(
    date: str,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Get the schedule data for one day."""
    entry = store.get_date(date=date)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"No schedule data for date '{date}'")
    return entry


@router.get(
    "/schedule",
    response_model=list[ScheduleResponse],
    response_model_exclude_none=True,
)
async def get_date_range(
    start_date: str = Query(..., min_length=1, max_length=64),
    end_date: str = Query(..., min_length=1, max_length=64),
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Get the schedule data for every day in a range that has any."""
    return store.get_date_range(start_date=start_date, end_date=end_date)
