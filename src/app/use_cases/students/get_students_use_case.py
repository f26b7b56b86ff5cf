from typing import List, Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Student


class GetStudentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get(self, student_id: str) -> Result[Student]:
        async with self.uow:
            student = await self.uow.students.get_by_id(student_id)
            if student is None:
                return Return.err(Error("NOT_FOUND", "Student not found"))
            return Return.ok(student)

    async def list(self, owner_id: Optional[str] = None) -> Result[List[Student]]:
        """Every student, or only those created by owner_id"""
        async with self.uow:
            if owner_id is None:
                return Return.ok(await self.uow.students.list_all())
            return Return.ok(await self.uow.students.list_by_owner(owner_id))
