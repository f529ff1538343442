# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional

from pydantic import BaseModel, Field

from schedule_store.models.domain import STATUS_OPERATING


# ── Write Schemas ──

class SetDateRequest(BaseModel):
    date: Optional[str] = Field(
        default=None,
        max_length=64,
        description="Day to set; defaults to the opening time's date",
        examples=["2024-05-01"],
    )
    opening_time: str = Field(..., min_length=1, max_length=64, examples=["2024-05-01T09:00:00"])
    closing_time: str = Field(..., min_length=1, max_length=64, examples=["2024-05-01T22:00:00"])
    special_hours: bool = Field(default=False, description="Append as special hours")
    schedule_type: str = Field(
        default=STATUS_OPERATING,
        min_length=1,
        max_length=255,
        description="Operating / Closed, or any other label for special hours",
    )


class SetRangeRequest(BaseModel):
    start_date: str = Field(..., min_length=1, max_length=64, examples=["2024-05-01"])
    end_date: str = Field(..., min_length=1, max_length=64, examples=["2024-05-07"])
    opening_time: str = Field(..., min_length=1, max_length=64)
    closing_time: str = Field(..., min_length=1, max_length=64)
    special_hours: bool = False
    schedule_type: str = Field(default=STATUS_OPERATING, min_length=1, max_length=255)


class WriteResponse(BaseModel):
    success: bool


# ── Read Schemas ──

class SpecialScheduleResponse(BaseModel):
    opening_time: str
    closing_time: str
    type: str


class ScheduleResponse(BaseModel):
    date: str
    opening_time: str
    closing_time: str
    type: str
    special: Optional[list[SpecialScheduleResponse]] = None
