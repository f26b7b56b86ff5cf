from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Student


class IStudentRepository(ABC):
    """Student repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, student_id: str) -> Optional[Student]:
        """Get student by internal ID"""
        pass

    @abstractmethod
    async def get_by_student_id(self, external_id: str) -> Optional[Student]:
        """Get student by school-issued student number"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Student]:
        """Get every student"""
        pass

    @abstractmethod
    async def list_by_owner(self, user_id: str) -> List[Student]:
        """Get students created by a user"""
        pass

    @abstractmethod
    async def create(self, student: Student) -> Student:
        """Create a new student"""
        pass

    @abstractmethod
    async def update(self, student: Student) -> Student:
        """Update existing student"""
        pass

    @abstractmethod
    async def delete(self, student_id: str) -> bool:
        """Delete a student row only. Returns True if it existed."""
        pass
