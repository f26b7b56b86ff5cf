"""
Manage API Key Use Case

Activation toggle and deletion of an existing key.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ApiKeyDisplay

logger = logging.getLogger(__name__)

NOT_FOUND = Error("NOT_FOUND", "API key not found or access denied")


class ManageApiKeyUseCase:
    """
    Business Rules:
    - Only the owner may toggle or delete a key
    - A key owned by someone else is reported exactly like a missing key
    - A deactivated key keeps its row and stays in listings
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def set_active(
        self, key_id: str, is_active: bool, user_id: str
    ) -> Result[ApiKeyDisplay]:
        async with self.uow:
            api_key = await self.uow.api_keys.get_by_id(key_id)
            if api_key is None or api_key.user_id != user_id:
                return Return.err(NOT_FOUND)

            api_key.is_active = is_active
            api_key = await self.uow.api_keys.update(api_key)
            await self.uow.commit()

            logger.info(f"API key {key_id} is_active={is_active}")
            return Return.ok(api_key.to_display())

    async def delete(self, key_id: str, user_id: str) -> Result[dict]:
        async with self.uow:
            api_key = await self.uow.api_keys.get_by_id(key_id)
            if api_key is None or api_key.user_id != user_id:
                return Return.err(NOT_FOUND)

            await self.uow.api_keys.delete(key_id)
            await self.uow.commit()

            logger.info(f"API key {key_id} deleted")
            return Return.ok({"id": key_id, "deleted": True})
