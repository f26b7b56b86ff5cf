from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ApiKeyDisplay


class ListApiKeysUseCase:
    """List the caller's API keys in masked form"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[List[ApiKeyDisplay]]:
        async with self.uow:
            api_keys = await self.uow.api_keys.get_by_user_id(user_id)
            return Return.ok([k.to_display() for k in api_keys])
