from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Student

from .dtos import CreateStudentCommand


class CreateStudentUseCase:
    """
    Business Rules:
    - student_id is unique across the store
    - enrollment_date defaults to today
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, command: CreateStudentCommand) -> Result[Student]:
        async with self.uow:
            existing = await self.uow.students.get_by_student_id(command.student_id)
            if existing:
                return Return.err(
                    Error("STUDENT_ID_TAKEN", "Student ID already exists")
                )

            student = Student(
                **command.model_dump(exclude_none=True), created_by=user_id
            )
            student = await self.uow.students.create(student)
            await self.uow.commit()
            return Return.ok(student)
