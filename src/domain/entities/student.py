"""
Student Entity
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from src.domain.base import BaseModel, generate_uuid, today_iso, utc_now

from .enums import StudentStatus


class Student(BaseModel):
    """
    Student entity.

    Business Rules:
    - student_id (the school-issued number) is unique across the store
    - Only the creator may update or delete
    - Deleting a student deletes its enrollments and attendance records
    """

    id: str = Field(default_factory=generate_uuid)
    student_id: str = Field(min_length=1, max_length=64)
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    enrollment_date: str = Field(default_factory=today_iso)
    status: StudentStatus = Field(default=StudentStatus.active)

    created_by: str

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
