from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.merge import apply_changes
from src.domain.entities import Student

from .dtos import UpdateStudentCommand


class UpdateStudentUseCase:
    """
    Business Rules:
    - Only the creator may update
    - Missing and not-owned are the same NOT_FOUND error
    - A new student_id must not belong to another student
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, student_id: str, command: UpdateStudentCommand, user_id: str
    ) -> Result[Student]:
        async with self.uow:
            student = await self.uow.students.get_by_id(student_id)
            if student is None or student.created_by != user_id:
                return Return.err(
                    Error("NOT_FOUND", "Student not found or access denied")
                )

            changes = command.model_dump(exclude_unset=True)
            new_external_id = changes.get("student_id")
            if new_external_id and new_external_id != student.student_id:
                clash = await self.uow.students.get_by_student_id(new_external_id)
                if clash:
                    return Return.err(
                        Error("STUDENT_ID_TAKEN", "Student ID already exists")
                    )

            merged = apply_changes(student, changes)
            if merged.is_err():
                return merged

            student = await self.uow.students.update(merged.value)
            await self.uow.commit()
            return Return.ok(student)
