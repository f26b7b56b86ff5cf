import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteStudentUseCase:
    """
    Business Rules:
    - Only the creator may delete
    - The student's enrollments and attendance records are removed with it,
      in the same unit of work
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, student_id: str, user_id: str) -> Result[dict]:
        async with self.uow:
            student = await self.uow.students.get_by_id(student_id)
            if student is None or student.created_by != user_id:
                return Return.err(
                    Error("NOT_FOUND", "Student not found or access denied")
                )

            enrollments = await self.uow.enrollments.delete_by_student_id(student_id)
            records = await self.uow.attendance.delete_by_student_id(student_id)
            await self.uow.students.delete(student_id)

            await self.uow.commit()

            logger.info(
                f"Deleted student {student_id} with {enrollments} enrollment(s) "
                f"and {records} attendance record(s)"
            )
            return Return.ok(
                {
                    "id": student_id,
                    "deleted_enrollments": enrollments,
                    "deleted_attendance_records": records,
                }
            )
