from typing import List

from libs.result import Result, Return
from src.app.services.aggregation import AttendanceAggregator, StudentWithEnrollment
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Enrollment


class GetEnrollmentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def class_roster(self, class_id: str) -> Result[List[StudentWithEnrollment]]:
        """
        Enrolled students of a class with their latest attendance there.

        An unknown class simply has an empty roster.
        """
        async with self.uow:
            return Return.ok(await AttendanceAggregator(self.uow).class_roster(class_id))

    async def student_enrollments(self, student_id: str) -> Result[List[Enrollment]]:
        async with self.uow:
            return Return.ok(await self.uow.enrollments.get_by_student_id(student_id))
