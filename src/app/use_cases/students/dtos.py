"""
Student Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from src.domain.base import IsoDate
from src.domain.entities import StudentStatus


class CreateStudentCommand(BaseModel):
    student_id: str = Field(..., min_length=1, max_length=64)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[IsoDate] = None
    enrollment_date: Optional[IsoDate] = None
    status: StudentStatus = StudentStatus.active


class UpdateStudentCommand(BaseModel):
    """Partial update; only fields the caller actually sent are applied"""

    student_id: Optional[str] = Field(None, min_length=1, max_length=64)
    first_name: Optional[str] = Field(None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[IsoDate] = None
    enrollment_date: Optional[IsoDate] = None
    status: Optional[StudentStatus] = None
