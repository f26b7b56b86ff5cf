from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.merge import apply_changes
from src.domain.entities import SchoolClass

from .dtos import UpdateClassCommand


class UpdateClassUseCase:
    """
    Business Rules:
    - Only the creator may update
    - Missing and not-owned are the same NOT_FOUND error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, class_id: str, command: UpdateClassCommand, user_id: str
    ) -> Result[SchoolClass]:
        async with self.uow:
            school_class = await self.uow.classes.get_by_id(class_id)
            if school_class is None or school_class.created_by != user_id:
                return Return.err(
                    Error("NOT_FOUND", "Class not found or access denied")
                )

            merged = apply_changes(school_class, command.model_dump(exclude_unset=True))
            if merged.is_err():
                return merged

            school_class = await self.uow.classes.update(merged.value)
            await self.uow.commit()
            return Return.ok(school_class)
