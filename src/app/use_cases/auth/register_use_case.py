import logging

from libs.result import Error, Result, Return
from src.app.services.credentials import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserPublic

from .dtos import RegisterCommand

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject a username that is already taken
    2. Hash password with bcrypt (fresh salt)
    3. Store the user and return its public view
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[UserPublic]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_username(command.username)
            if existing_user:
                return Return.err(
                    Error("USERNAME_TAKEN", "Username already exists")
                )

            user = User(
                username=command.username,
                password_hash=hash_password(command.password),
                email=command.email,
                first_name=command.first_name,
                last_name=command.last_name,
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

            logger.info(f"Registered user {user.id}")
            return Return.ok(user.to_public())
