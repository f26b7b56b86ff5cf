"""
Enrollment Entity

Many-to-many link between a class and a student.
"""

from datetime import datetime

from sqlmodel import Field

from src.domain.base import BaseModel, generate_uuid, utc_now

from .enums import EnrollmentStatus


class Enrollment(BaseModel):
    id: str = Field(default_factory=generate_uuid)
    class_id: str
    student_id: str
    status: EnrollmentStatus = Field(default=EnrollmentStatus.enrolled)
    enrolled_at: datetime = Field(default_factory=utc_now)
