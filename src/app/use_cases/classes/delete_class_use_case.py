"""
Delete Class Use Case

Removes a class together with everything that points at it.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteClassUseCase:
    """
    Business Rules:
    - Only the creator may delete
    - Enrollments and attendance records of the class go first, then the class
    - All of it commits together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, class_id: str, user_id: str) -> Result[dict]:
        async with self.uow:
            school_class = await self.uow.classes.get_by_id(class_id)
            if school_class is None or school_class.created_by != user_id:
                return Return.err(
                    Error("NOT_FOUND", "Class not found or access denied")
                )

            enrollments = await self.uow.enrollments.delete_by_class_id(class_id)
            records = await self.uow.attendance.delete_by_class_id(class_id)
            await self.uow.classes.delete(class_id)

            await self.uow.commit()

            logger.info(
                f"Deleted class {class_id} with {enrollments} enrollment(s) "
                f"and {records} attendance record(s)"
            )
            return Return.ok(
                {
                    "id": class_id,
                    "deleted_enrollments": enrollments,
                    "deleted_attendance_records": records,
                }
            )
