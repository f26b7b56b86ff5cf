from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SchoolClass

from .dtos import CreateClassCommand


class CreateClassUseCase:
    """Create a class owned by the caller"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, command: CreateClassCommand) -> Result[SchoolClass]:
        async with self.uow:
            school_class = SchoolClass(**command.model_dump(), created_by=user_id)
            school_class = await self.uow.classes.create(school_class)
            await self.uow.commit()
            return Return.ok(school_class)
