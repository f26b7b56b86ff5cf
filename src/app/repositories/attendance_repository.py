from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import AttendanceRecord


class IAttendanceRepository(ABC):
    """Attendance record repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        """Get attendance record by ID"""
        pass

    @abstractmethod
    async def get_by_class_id(
        self, class_id: str, date: Optional[str] = None
    ) -> List[AttendanceRecord]:
        """Get records for a class, optionally for one date"""
        pass

    @abstractmethod
    async def get_by_student_id(
        self, student_id: str, class_id: Optional[str] = None
    ) -> List[AttendanceRecord]:
        """Get records for a student, optionally within one class"""
        pass

    @abstractmethod
    async def create(self, record: AttendanceRecord) -> AttendanceRecord:
        """Create a new attendance record"""
        pass

    @abstractmethod
    async def update(self, record: AttendanceRecord) -> AttendanceRecord:
        """Update existing attendance record"""
        pass

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete one record. Returns True if it existed."""
        pass

    @abstractmethod
    async def delete_by_class_id(self, class_id: str) -> int:
        """Delete every record of a class. Returns count deleted."""
        pass

    @abstractmethod
    async def delete_by_student_id(self, student_id: str) -> int:
        """Delete every record of a student. Returns count deleted."""
        pass
