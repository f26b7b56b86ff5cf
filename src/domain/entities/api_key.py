"""
API Key Entity

Long-lived credential for machine clients, sent in the X-API-Key header.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from src.domain.base import BaseModel, generate_uuid, utc_now

MASK_LENGTH = 52


class ApiKeyDisplay(BaseModel):
    """API key as shown in listings: prefix plus a fixed-length mask, no hash"""

    id: str
    name: str
    key_prefix: str
    masked_key: str
    user_id: str
    is_active: bool
    created_at: datetime
    last_used_at: Optional[datetime] = None


class ApiKeyCreated(BaseModel):
    """Returned exactly once, when the key is created"""

    id: str
    name: str
    key: str
    key_prefix: str
    user_id: str
    is_active: bool
    created_at: datetime


class ApiKey(BaseModel):
    """
    API key entity.

    Business Rules:
    - Only the SHA-256 of the raw key is stored
    - key_prefix keeps the first 12 characters for display
    - Inactive keys stay listed but never verify
    """

    id: str = Field(default_factory=generate_uuid)
    name: str = Field(min_length=1, max_length=255)
    key_hash: str = Field(max_length=64)
    key_prefix: str = Field(max_length=12)
    user_id: str
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now)
    last_used_at: Optional[datetime] = None

    def masked(self) -> str:
        return self.key_prefix + "*" * MASK_LENGTH

    def to_display(self) -> ApiKeyDisplay:
        return ApiKeyDisplay(
            id=self.id,
            name=self.name,
            key_prefix=self.key_prefix,
            masked_key=self.masked(),
            user_id=self.user_id,
            is_active=self.is_active,
            created_at=self.created_at,
            last_used_at=self.last_used_at,
        )
