"""
Enroll / Unenroll Use Case
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Enrollment, EnrollmentStatus


class EnrollStudentUseCase:
    """
    Business Rules:
    - Class and student must both exist
    - At most one row with status=enrolled per (class, student)
    - Unenroll removes every row for the pair; none at all is NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def enroll(self, class_id: str, student_id: str) -> Result[Enrollment]:
        async with self.uow:
            if await self.uow.classes.get_by_id(class_id) is None:
                return Return.err(Error("CLASS_NOT_FOUND", "Class not found"))
            if await self.uow.students.get_by_id(student_id) is None:
                return Return.err(Error("STUDENT_NOT_FOUND", "Student not found"))

            existing = await self.uow.enrollments.find(class_id, student_id)
            if any(e.status == EnrollmentStatus.enrolled for e in existing):
                return Return.err(
                    Error("ALREADY_ENROLLED", "Student is already enrolled in this class")
                )

            enrollment = Enrollment(class_id=class_id, student_id=student_id)
            enrollment = await self.uow.enrollments.create(enrollment)
            await self.uow.commit()
            return Return.ok(enrollment)

    async def unenroll(self, class_id: str, student_id: str) -> Result[dict]:
        async with self.uow:
            existing = await self.uow.enrollments.find(class_id, student_id)
            if not existing:
                return Return.err(Error("NOT_FOUND", "Enrollment not found"))

            for enrollment in existing:
                await self.uow.enrollments.delete(enrollment.id)
            await self.uow.commit()
            return Return.ok({"class_id": class_id, "student_id": student_id})
