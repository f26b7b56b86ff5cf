"""
API Key Use Case DTOs
"""

from pydantic import BaseModel, Field

from src.domain.entities import ApiKeyDisplay, UserPublic


class CreateApiKeyCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class VerifiedApiKey(BaseModel):
    """An API key that passed verification, with its owner"""

    api_key: ApiKeyDisplay
    user: UserPublic
