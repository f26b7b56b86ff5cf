from typing import List, Optional

from libs.result import Error, Result, Return
from src.app.services.aggregation import (
    AttendanceAggregator,
    AttendanceRecordWithDetails,
    AttendanceStats,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AttendanceRecord


class GetAttendanceUseCase:
    """Attendance reads. List reads come back joined with student, class and marker."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get(self, record_id: str) -> Result[AttendanceRecord]:
        async with self.uow:
            record = await self.uow.attendance.get_by_id(record_id)
            if record is None:
                return Return.err(Error("NOT_FOUND", "Attendance record not found"))
            return Return.ok(record)

    async def by_class(
        self, class_id: str, date: Optional[str] = None
    ) -> Result[List[AttendanceRecordWithDetails]]:
        async with self.uow:
            records = await self.uow.attendance.get_by_class_id(class_id, date)
            return Return.ok(await AttendanceAggregator(self.uow).enrich_attendance(records))

    async def by_student(
        self, student_id: str, class_id: Optional[str] = None
    ) -> Result[List[AttendanceRecordWithDetails]]:
        async with self.uow:
            records = await self.uow.attendance.get_by_student_id(student_id, class_id)
            return Return.ok(await AttendanceAggregator(self.uow).enrich_attendance(records))

    async def stats(
        self,
        class_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Result[AttendanceStats]:
        """Per-status counts for a class within [start_date, end_date], bounds optional"""
        async with self.uow:
            return Return.ok(
                await AttendanceAggregator(self.uow).class_stats(
                    class_id, start_date, end_date
                )
            )
