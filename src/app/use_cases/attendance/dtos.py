"""
Attendance Use Case DTOs
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from src.domain.base import IsoDate
from src.domain.entities import AttendanceRecord, AttendanceStatus


class LocationFields(BaseModel):
    """Raw device location, stored as given"""

    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    location_accuracy: Optional[float] = Field(None, ge=0)
    location_address: Optional[str] = None


class MarkAttendanceCommand(LocationFields):
    class_id: str = Field(..., min_length=1)
    student_id: str = Field(..., min_length=1)
    date: IsoDate
    status: AttendanceStatus
    notes: Optional[str] = None
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None


class BulkAttendanceRow(LocationFields):
    student_id: str = Field(..., min_length=1)
    status: AttendanceStatus
    notes: Optional[str] = None


class BulkMarkAttendanceCommand(BaseModel):
    """
    One class, one date, many students.

    Rows stay unvalidated here so that one malformed row fails alone.
    """

    class_id: str = Field(..., min_length=1)
    date: IsoDate
    records: List[Any]


class UpdateAttendanceCommand(LocationFields):
    """Partial update; class, student and marker cannot be changed"""

    date: Optional[IsoDate] = None
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None


class ItemError(BaseModel):
    code: str
    message: str
    details: List[Any] = []


class BulkAttendanceItem(BaseModel):
    """Outcome of one bulk row, in input order"""

    index: int
    student_id: Optional[str] = None
    success: bool
    record: Optional[AttendanceRecord] = None
    error: Optional[ItemError] = None


class BulkAttendanceResponse(BaseModel):
    succeeded: int
    failed: int
    results: List[BulkAttendanceItem]
