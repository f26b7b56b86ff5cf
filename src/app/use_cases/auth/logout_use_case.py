from libs.result import Result, Return
from src.app.services.credentials import hash_session_token
from src.app.services.unit_of_work import UnitOfWork

from .dtos import LogoutResponse


class LogoutUseCase:
    """Delete the session behind a token. Idempotent."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_token: str) -> Result[LogoutResponse]:
        async with self.uow:
            await self.uow.sessions.delete_by_token_hash(
                hash_session_token(session_token)
            )
            await self.uow.commit()

        return Return.ok(
            LogoutResponse(success=True, message="Logged out successfully")
        )
