"""
Class Use Case DTOs
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities import ClassStatus


class CreateClassCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    instructor: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = None
    capacity: int = Field(30, gt=0)
    schedule: str
    status: ClassStatus = ClassStatus.active


class UpdateClassCommand(BaseModel):
    """Partial update; only fields the caller actually sent are applied"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    instructor: Optional[str] = Field(None, min_length=1, max_length=255)
    location: Optional[str] = None
    capacity: Optional[int] = Field(None, gt=0)
    schedule: Optional[str] = None
    status: Optional[ClassStatus] = None
