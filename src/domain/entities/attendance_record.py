"""
Attendance Record Entity

One mark for one student in one class on one calendar date.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from src.domain.base import BaseModel, generate_uuid, utc_now

from .enums import AttendanceStatus


class AttendanceRecord(BaseModel):
    """
    Attendance record entity.

    Business Rules:
    - date is a zero-padded YYYY-MM-DD string, so lexical order is date order
    - Location fields are stored verbatim, never interpreted
    - Only the marking user may update or delete
    - Several records for the same (class, student, date) may exist; the
      latest by (date, marked_at) is the current one
    """

    id: str = Field(default_factory=generate_uuid)
    class_id: str
    student_id: str
    date: str = Field(min_length=10, max_length=10)
    status: AttendanceStatus
    notes: Optional[str] = None

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location_accuracy: Optional[float] = None
    location_address: Optional[str] = None

    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None

    marked_by: str
    marked_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
