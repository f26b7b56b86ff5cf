from datetime import datetime
from typing import List, Optional

from src.adapter.services.in_memory_store import StoreTransaction
from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session


class SessionRepository(ISessionRepository):
    """
    Session repository implementation over the in-memory store.

    Rows are keyed by token hash, the only way a request finds its session.
    """

    table = "sessions"

    def __init__(self, tx: StoreTransaction):
        self.tx = tx

    async def get_by_token_hash(self, token_hash: str) -> Optional[Session]:
        """Get session by the SHA-256 of its token"""
        return self.tx.get(self.table, token_hash)

    async def get_by_user_id(self, user_id: str) -> List[Session]:
        """Get all sessions for a user"""
        return [s for s in self.tx.values(self.table) if s.user_id == user_id]

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        return self.tx.put(self.table, session_obj.token_hash, session_obj)

    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete a session"""
        return self.tx.delete(self.table, token_hash)

    async def delete_expired(self, now: datetime) -> int:
        """Delete every session past its expiry"""
        expired = [s.token_hash for s in self.tx.values(self.table) if s.is_expired(now)]
        for token_hash in expired:
            self.tx.delete(self.table, token_hash)
        return len(expired)

    async def count(self) -> int:
        return len(self.tx.keys(self.table))
