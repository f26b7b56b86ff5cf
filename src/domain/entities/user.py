"""
User Entity

A staff account that owns classes, students and attendance records.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from src.domain.base import BaseModel, generate_uuid, utc_now


class UserPublic(BaseModel):
    """
    Serializable view of a user.

    Has no password field at all, so nothing built from it can leak the hash.
    """

    id: str
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime


class User(BaseModel):
    """
    User entity.

    Business Rules:
    - Username must be unique across all users
    - Password stored as bcrypt hash (salt embedded in the hash string)
    - Never returned from a read path; use to_public()
    """

    id: str = Field(default_factory=generate_uuid)
    username: str = Field(min_length=3, max_length=255)
    password_hash: str

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now)

    def to_public(self) -> UserPublic:
        return UserPublic(
            id=self.id,
            username=self.username,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            created_at=self.created_at,
        )
