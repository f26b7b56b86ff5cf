"""
Class Entity

A scheduled class that students enroll in and attendance is taken for.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from src.domain.base import BaseModel, generate_uuid, utc_now

from .enums import ClassStatus


class SchoolClass(BaseModel):
    """
    Class entity.

    Business Rules:
    - Capacity is a positive integer
    - schedule is an opaque client payload, stored verbatim
    - Only the creator may update or delete
    - Deleting a class deletes its enrollments and attendance records
    """

    id: str = Field(default_factory=generate_uuid)
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    instructor: str = Field(min_length=1, max_length=255)
    location: Optional[str] = None
    capacity: int = Field(default=30, gt=0)
    schedule: str
    status: ClassStatus = Field(default=ClassStatus.active)

    created_by: str

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
