"""
Login Use Case

Verifies username and password and opens a server-side session.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.credentials import (
    burn_password_check,
    generate_session_token,
    hash_session_token,
    verify_password,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import Session

from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and session issuance.

    Business Rules:
    - Constant-effort password check, even for unknown usernames
    - Unknown user and wrong password produce the same error
    - Session token is random, returned once, stored only as a hash
    - Session expires SESSION_TTL_DAYS after login
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, username: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            username: Login name
            password: Plain text password

        Returns:
            Result with LoginResponse containing the session token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_username(username)

            if user is None:
                # Hash dummy password to maintain constant time
                burn_password_check()
                logger.warning(f"Login failed: unknown username {username!r}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            if not verify_password(password, user.password_hash):
                logger.warning(f"Login failed: wrong password for user {user.id}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            session_token = generate_session_token()
            now = self.clock()
            session = Session(
                user_id=user.id,
                token_hash=hash_session_token(session_token),
                expires_at=now + timedelta(days=ApplicationConfig.SESSION_TTL_DAYS),
                created_at=now,
            )
            await self.uow.sessions.create(session)

            await self.uow.commit()

            logger.info(f"User {user.id} logged in, session {session.id}")
            return Return.ok(
                LoginResponse(
                    user=user.to_public(),
                    session_token=session_token,
                    expires_at=session.expires_at,
                )
            )
