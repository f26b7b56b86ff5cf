from typing import List, Optional

from src.adapter.services.in_memory_store import StoreTransaction
from src.app.repositories.student_repository import IStudentRepository
from src.domain.entities import Student


class StudentRepository(IStudentRepository):
    """Student repository implementation over the in-memory store"""

    table = "students"

    def __init__(self, tx: StoreTransaction):
        self.tx = tx

    async def get_by_id(self, student_id: str) -> Optional[Student]:
        """Get student by internal ID"""
        return self.tx.get(self.table, student_id)

    async def get_by_student_id(self, external_id: str) -> Optional[Student]:
        """Get student by school-issued student number"""
        for student in self.tx.values(self.table):
            if student.student_id == external_id:
                return student
        return None

    async def list_all(self) -> List[Student]:
        """Get every student, in creation order"""
        return list(self.tx.values(self.table))

    async def list_by_owner(self, user_id: str) -> List[Student]:
        """Get students created by a user"""
        return [s for s in self.tx.values(self.table) if s.created_by == user_id]

    async def create(self, student: Student) -> Student:
        """Create a new student"""
        return self.tx.put(self.table, student.id, student)

    async def update(self, student: Student) -> Student:
        """Update existing student"""
        return self.tx.put(self.table, student.id, student)

    async def delete(self, student_id: str) -> bool:
        """Delete a student row"""
        return self.tx.delete(self.table, student_id)
