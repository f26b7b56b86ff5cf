import logging
from datetime import datetime
from typing import Callable, Optional

from libs.result import Error, Result, Return
from src.app.services.credentials import hash_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import UserPublic

logger = logging.getLogger(__name__)

UNAUTHORIZED = Error("UNAUTHORIZED", "Authentication required")


class AuthenticateSessionUseCase:
    """
    Resolve a session token to its user.

    Business Rules:
    - Usable up to and including expires_at
    - An expired session found here is deleted on the spot
    - Missing, expired and orphaned sessions all fail the same way
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, session_token: Optional[str]) -> Result[UserPublic]:
        if not session_token:
            return Return.err(UNAUTHORIZED)

        token_hash = hash_session_token(session_token)
        async with self.uow:
            session = await self.uow.sessions.get_by_token_hash(token_hash)
            if session is None:
                logger.warning("Session lookup failed: unknown token")
                return Return.err(UNAUTHORIZED)

            if session.is_expired(self.clock()):
                await self.uow.sessions.delete_by_token_hash(token_hash)
                await self.uow.commit()
                logger.warning(f"Session {session.id} expired, evicted on lookup")
                return Return.err(UNAUTHORIZED)

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None:
                logger.warning(
                    f"Session {session.id} references missing user {session.user_id}"
                )
                return Return.err(UNAUTHORIZED)

            return Return.ok(user.to_public())
