from typing import List, Optional

from src.adapter.services.in_memory_store import StoreTransaction
from src.app.repositories.class_repository import IClassRepository
from src.domain.entities import SchoolClass


class ClassRepository(IClassRepository):
    """Class repository implementation over the in-memory store"""

    table = "classes"

    def __init__(self, tx: StoreTransaction):
        self.tx = tx

    async def get_by_id(self, class_id: str) -> Optional[SchoolClass]:
        """Get class by ID"""
        return self.tx.get(self.table, class_id)

    async def list_all(self) -> List[SchoolClass]:
        """Get every class, in creation order"""
        return list(self.tx.values(self.table))

    async def list_by_owner(self, user_id: str) -> List[SchoolClass]:
        """Get classes created by a user"""
        return [c for c in self.tx.values(self.table) if c.created_by == user_id]

    async def create(self, school_class: SchoolClass) -> SchoolClass:
        """Create a new class"""
        return self.tx.put(self.table, school_class.id, school_class)

    async def update(self, school_class: SchoolClass) -> SchoolClass:
        """Update existing class"""
        return self.tx.put(self.table, school_class.id, school_class)

    async def delete(self, class_id: str) -> bool:
        """Delete a class row"""
        return self.tx.delete(self.table, class_id)
