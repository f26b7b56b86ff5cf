"""
Session Entity

Server-side record behind the session cookie.
"""

from datetime import datetime

from sqlmodel import Field

from src.domain.base import BaseModel, generate_uuid, utc_now


class Session(BaseModel):
    """
    Session entity.

    Business Rules:
    - The raw token is only ever held by the client; the store keeps its SHA-256
    - Valid while now <= expires_at (inclusive)
    - Expired sessions are deleted on lookup and by the periodic sweep
    """

    id: str = Field(default_factory=generate_uuid)
    user_id: str
    token_hash: str = Field(max_length=64)
    expires_at: datetime
    created_at: datetime = Field(default_factory=utc_now)

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
