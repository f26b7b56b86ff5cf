import logging
from datetime import datetime
from typing import Callable, Optional

from libs.result import Error, Result, Return
from src.app.services.credentials import hash_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .dtos import VerifiedApiKey

logger = logging.getLogger(__name__)

INVALID_API_KEY = Error("INVALID_API_KEY", "Invalid API key")


class VerifyApiKeyUseCase:
    """
    Verify a raw API key presented by a caller.

    Business Rules:
    - Lookup is by SHA-256 of the presented key
    - Unknown, inactive and orphaned keys fail with the same error
    - Success stamps last_used_at in the same unit of work
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, raw_key: Optional[str]) -> Result[VerifiedApiKey]:
        if not raw_key:
            return Return.err(INVALID_API_KEY)

        key_hash = hash_api_key(raw_key)
        async with self.uow:
            api_key = await self.uow.api_keys.get_by_hash(key_hash)
            if api_key is None:
                logger.warning("API key rejected: unknown key")
                return Return.err(INVALID_API_KEY)

            if not api_key.is_active:
                logger.warning(f"API key rejected: key {api_key.id} is inactive")
                return Return.err(INVALID_API_KEY)

            user = await self.uow.users.get_by_id(api_key.user_id)
            if user is None:
                logger.warning(
                    f"API key rejected: key {api_key.id} owner {api_key.user_id} missing"
                )
                return Return.err(INVALID_API_KEY)

            api_key.last_used_at = self.clock()
            api_key = await self.uow.api_keys.update(api_key)
            await self.uow.commit()

            return Return.ok(
                VerifiedApiKey(api_key=api_key.to_display(), user=user.to_public())
            )
