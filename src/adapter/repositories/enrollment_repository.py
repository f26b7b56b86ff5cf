from typing import List

from src.adapter.services.in_memory_store import StoreTransaction
from src.app.repositories.enrollment_repository import IEnrollmentRepository
from src.domain.entities import Enrollment


class EnrollmentRepository(IEnrollmentRepository):
    """Enrollment repository implementation over the in-memory store"""

    table = "enrollments"

    def __init__(self, tx: StoreTransaction):
        self.tx = tx

    async def get_by_class_id(self, class_id: str) -> List[Enrollment]:
        """Get all enrollment rows for a class"""
        return [e for e in self.tx.values(self.table) if e.class_id == class_id]

    async def get_by_student_id(self, student_id: str) -> List[Enrollment]:
        """Get all enrollment rows for a student"""
        return [e for e in self.tx.values(self.table) if e.student_id == student_id]

    async def find(self, class_id: str, student_id: str) -> List[Enrollment]:
        """Get enrollment rows for one (class, student) pair"""
        return [
            e
            for e in self.tx.values(self.table)
            if e.class_id == class_id and e.student_id == student_id
        ]

    async def create(self, enrollment: Enrollment) -> Enrollment:
        """Create a new enrollment"""
        return self.tx.put(self.table, enrollment.id, enrollment)

    async def delete(self, enrollment_id: str) -> bool:
        """Delete one enrollment row"""
        return self.tx.delete(self.table, enrollment_id)

    async def delete_by_class_id(self, class_id: str) -> int:
        """Delete every enrollment of a class"""
        doomed = await self.get_by_class_id(class_id)
        for enrollment in doomed:
            self.tx.delete(self.table, enrollment.id)
        return len(doomed)

    async def delete_by_student_id(self, student_id: str) -> int:
        """Delete every enrollment of a student"""
        doomed = await self.get_by_student_id(student_id)
        for enrollment in doomed:
            self.tx.delete(self.table, enrollment.id)
        return len(doomed)
