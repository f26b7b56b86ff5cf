from typing import Optional

from src.adapter.services.in_memory_store import StoreTransaction
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation over the in-memory store"""

    table = "users"

    def __init__(self, tx: StoreTransaction):
        self.tx = tx

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        return self.tx.get(self.table, user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by login name"""
        for user in self.tx.values(self.table):
            if user.username == username:
                return user
        return None

    async def create(self, user: User) -> User:
        """Create a new user"""
        return self.tx.put(self.table, user.id, user)
