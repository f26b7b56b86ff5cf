"""
Mark Attendance Use Case

Single and bulk attendance marking.
"""

import logging
from typing import Any, Dict

from pydantic import ValidationError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.merge import validation_error
from src.domain.base import utc_now
from src.domain.entities import AttendanceRecord

from .dtos import (
    BulkAttendanceItem,
    BulkAttendanceResponse,
    BulkAttendanceRow,
    BulkMarkAttendanceCommand,
    ItemError,
    MarkAttendanceCommand,
)

logger = logging.getLogger(__name__)


class MarkAttendanceUseCase:
    """
    Business Rules:
    - Class and student must exist
    - Every call appends a record; nothing is overwritten
    - Bulk rows are independent: each gets its own result and a failed row
      does not stop the rest
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _mark(self, user_id: str, data: Dict[str, Any]) -> Result[AttendanceRecord]:
        if await self.uow.classes.get_by_id(data["class_id"]) is None:
            return Return.err(Error("CLASS_NOT_FOUND", "Class not found"))
        if await self.uow.students.get_by_id(data["student_id"]) is None:
            return Return.err(Error("STUDENT_NOT_FOUND", "Student not found"))

        now = utc_now()
        record = AttendanceRecord(
            **data, marked_by=user_id, marked_at=now, updated_at=now
        )
        return Return.ok(await self.uow.attendance.create(record))

    async def execute(
        self, user_id: str, command: MarkAttendanceCommand
    ) -> Result[AttendanceRecord]:
        async with self.uow:
            result = await self._mark(user_id, command.model_dump())
            if result.is_err():
                return result
            await self.uow.commit()
            return result

    async def execute_bulk(
        self, user_id: str, command: BulkMarkAttendanceCommand
    ) -> Result[BulkAttendanceResponse]:
        items = []
        async with self.uow:
            for index, raw_row in enumerate(command.records):
                student_id = raw_row.get("student_id") if isinstance(raw_row, dict) else None
                # Echo the id back only when it could be one
                if not isinstance(student_id, str):
                    student_id = None
                try:
                    row = BulkAttendanceRow.model_validate(raw_row)
                except ValidationError as exc:
                    error = validation_error(exc)
                    items.append(
                        BulkAttendanceItem(
                            index=index,
                            student_id=student_id,
                            success=False,
                            error=ItemError(
                                code=error.code,
                                message=error.message,
                                details=error.details,
                            ),
                        )
                    )
                    continue

                data = {
                    **row.model_dump(),
                    "class_id": command.class_id,
                    "date": command.date,
                }
                result = await self._mark(user_id, data)
                if result.is_err():
                    items.append(
                        BulkAttendanceItem(
                            index=index,
                            student_id=row.student_id,
                            success=False,
                            error=ItemError(
                                code=result.error.code, message=result.error.message
                            ),
                        )
                    )
                else:
                    items.append(
                        BulkAttendanceItem(
                            index=index,
                            student_id=row.student_id,
                            success=True,
                            record=result.value,
                        )
                    )

            await self.uow.commit()

        succeeded = sum(1 for item in items if item.success)
        if succeeded != len(items):
            logger.warning(
                f"Bulk attendance for class {command.class_id} on {command.date}: "
                f"{len(items) - succeeded} of {len(items)} row(s) failed"
            )
        return Return.ok(
            BulkAttendanceResponse(
                succeeded=succeeded,
                failed=len(items) - succeeded,
                results=items,
            )
        )
