from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.merge import apply_changes
from src.domain.entities import AttendanceRecord

from .dtos import UpdateAttendanceCommand

NOT_FOUND = Error("NOT_FOUND", "Attendance record not found or access denied")


class UpdateAttendanceUseCase:
    """
    Business Rules:
    - Only the user who marked a record may change or delete it
    - Missing and not-owned are the same NOT_FOUND error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def update(
        self, record_id: str, command: UpdateAttendanceCommand, user_id: str
    ) -> Result[AttendanceRecord]:
        async with self.uow:
            record = await self.uow.attendance.get_by_id(record_id)
            if record is None or record.marked_by != user_id:
                return Return.err(NOT_FOUND)

            merged = apply_changes(record, command.model_dump(exclude_unset=True))
            if merged.is_err():
                return merged

            record = await self.uow.attendance.update(merged.value)
            await self.uow.commit()
            return Return.ok(record)

    async def delete(self, record_id: str, user_id: str) -> Result[dict]:
        async with self.uow:
            record = await self.uow.attendance.get_by_id(record_id)
            if record is None or record.marked_by != user_id:
                return Return.err(NOT_FOUND)

            await self.uow.attendance.delete(record_id)
            await self.uow.commit()
            return Return.ok({"id": record_id, "deleted": True})
