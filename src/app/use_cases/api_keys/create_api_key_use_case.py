import logging

from libs.result import Result, Return
from src.app.services.credentials import api_key_prefix, generate_api_key, hash_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ApiKey, ApiKeyCreated

from .dtos import CreateApiKeyCommand

logger = logging.getLogger(__name__)


class CreateApiKeyUseCase:
    """
    Issue a new API key.

    Business Rules:
    - Raw key is ak_ + 32 random bytes hex
    - Only SHA-256(raw key) and the first 12 characters are stored
    - The raw key is in this response and nowhere else, ever
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, command: CreateApiKeyCommand
    ) -> Result[ApiKeyCreated]:
        raw_key = generate_api_key()

        async with self.uow:
            api_key = ApiKey(
                name=command.name,
                key_hash=hash_api_key(raw_key),
                key_prefix=api_key_prefix(raw_key),
                user_id=user_id,
            )
            api_key = await self.uow.api_keys.create(api_key)
            await self.uow.commit()

        logger.info(f"Created API key {api_key.id} for user {user_id}")
        return Return.ok(
            ApiKeyCreated(
                id=api_key.id,
                name=api_key.name,
                key=raw_key,
                key_prefix=api_key.key_prefix,
                user_id=api_key.user_id,
                is_active=api_key.is_active,
                created_at=api_key.created_at,
            )
        )
