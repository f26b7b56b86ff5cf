from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Enrollment


class IEnrollmentRepository(ABC):
    """Enrollment repository interface - application layer"""

    @abstractmethod
    async def get_by_class_id(self, class_id: str) -> List[Enrollment]:
        """Get all enrollment rows for a class, any status"""
        pass

    @abstractmethod
    async def get_by_student_id(self, student_id: str) -> List[Enrollment]:
        """Get all enrollment rows for a student, any status"""
        pass

    @abstractmethod
    async def find(self, class_id: str, student_id: str) -> List[Enrollment]:
        """Get enrollment rows for one (class, student) pair"""
        pass

    @abstractmethod
    async def create(self, enrollment: Enrollment) -> Enrollment:
        """Create a new enrollment"""
        pass

    @abstractmethod
    async def delete(self, enrollment_id: str) -> bool:
        """Delete one enrollment row. Returns True if it existed."""
        pass

    @abstractmethod
    async def delete_by_class_id(self, class_id: str) -> int:
        """Delete every enrollment of a class. Returns count deleted."""
        pass

    @abstractmethod
    async def delete_by_student_id(self, student_id: str) -> int:
        """Delete every enrollment of a student. Returns count deleted."""
        pass
