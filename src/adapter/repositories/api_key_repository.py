from typing import List, Optional

from src.adapter.services.in_memory_store import StoreTransaction
from src.app.repositories.api_key_repository import IApiKeyRepository
from src.domain.entities import ApiKey


class ApiKeyRepository(IApiKeyRepository):
    """API key repository implementation over the in-memory store"""

    table = "api_keys"

    def __init__(self, tx: StoreTransaction):
        self.tx = tx

    async def get_by_id(self, key_id: str) -> Optional[ApiKey]:
        """Get API key by ID"""
        return self.tx.get(self.table, key_id)

    async def get_by_hash(self, key_hash: str) -> Optional[ApiKey]:
        """Get API key by hash of the raw key"""
        for api_key in self.tx.values(self.table):
            if api_key.key_hash == key_hash:
                return api_key
        return None

    async def get_by_user_id(self, user_id: str) -> List[ApiKey]:
        """Get all API keys owned by a user"""
        return [k for k in self.tx.values(self.table) if k.user_id == user_id]

    async def create(self, api_key: ApiKey) -> ApiKey:
        """Create a new API key"""
        return self.tx.put(self.table, api_key.id, api_key)

    async def update(self, api_key: ApiKey) -> ApiKey:
        """Update existing API key"""
        return self.tx.put(self.table, api_key.id, api_key)

    async def delete(self, key_id: str) -> bool:
        """Delete an API key"""
        return self.tx.delete(self.table, key_id)
