from typing import List, Optional

from src.adapter.services.in_memory_store import StoreTransaction
from src.app.repositories.attendance_repository import IAttendanceRepository
from src.domain.entities import AttendanceRecord


class AttendanceRepository(IAttendanceRepository):
    """Attendance record repository implementation over the in-memory store"""

    table = "attendance"

    def __init__(self, tx: StoreTransaction):
        self.tx = tx

    async def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        """Get attendance record by ID"""
        return self.tx.get(self.table, record_id)

    async def get_by_class_id(
        self, class_id: str, date: Optional[str] = None
    ) -> List[AttendanceRecord]:
        """Get records for a class, optionally for one date"""
        return [
            r
            for r in self.tx.values(self.table)
            if r.class_id == class_id and (date is None or r.date == date)
        ]

    async def get_by_student_id(
        self, student_id: str, class_id: Optional[str] = None
    ) -> List[AttendanceRecord]:
        """Get records for a student, optionally within one class"""
        return [
            r
            for r in self.tx.values(self.table)
            if r.student_id == student_id and (class_id is None or r.class_id == class_id)
        ]

    async def create(self, record: AttendanceRecord) -> AttendanceRecord:
        """Create a new attendance record"""
        return self.tx.put(self.table, record.id, record)

    async def update(self, record: AttendanceRecord) -> AttendanceRecord:
        """Update existing attendance record"""
        return self.tx.put(self.table, record.id, record)

    async def delete(self, record_id: str) -> bool:
        """Delete one record"""
        return self.tx.delete(self.table, record_id)

    async def delete_by_class_id(self, class_id: str) -> int:
        """Delete every record of a class"""
        doomed = await self.get_by_class_id(class_id)
        for record in doomed:
            self.tx.delete(self.table, record.id)
        return len(doomed)

    async def delete_by_student_id(self, student_id: str) -> int:
        """Delete every record of a student"""
        doomed = await self.get_by_student_id(student_id)
        for record in doomed:
            self.tx.delete(self.table, record.id)
        return len(doomed)
