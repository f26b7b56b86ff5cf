from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import ApiKey


class IApiKeyRepository(ABC):
    """API key repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, key_id: str) -> Optional[ApiKey]:
        """Get API key by ID"""
        pass

    @abstractmethod
    async def get_by_hash(self, key_hash: str) -> Optional[ApiKey]:
        """Get API key by the SHA-256 of the raw key, active or not"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[ApiKey]:
        """Get all API keys owned by a user"""
        pass

    @abstractmethod
    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new API key"""
        pass

    @abstractmethod
    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing API key"""
        pass

    @abstractmethod
    async def delete(self, key_id: str) -> bool:
        """Delete an API key. Returns True if it existed."""
        pass
