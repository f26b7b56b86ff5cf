"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities import UserPublic


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated registration intent"""

    username: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=8)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserPublic
    session_token: str
    expires_at: datetime


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    success: bool
    message: str
