from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import SchoolClass


class IClassRepository(ABC):
    """Class repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, class_id: str) -> Optional[SchoolClass]:
        """Get class by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[SchoolClass]:
        """Get every class"""
        pass

    @abstractmethod
    async def list_by_owner(self, user_id: str) -> List[SchoolClass]:
        """Get classes created by a user"""
        pass

    @abstractmethod
    async def create(self, school_class: SchoolClass) -> SchoolClass:
        """Create a new class"""
        pass

    @abstractmethod
    async def update(self, school_class: SchoolClass) -> SchoolClass:
        """Update existing class"""
        pass

    @abstractmethod
    async def delete(self, class_id: str) -> bool:
        """Delete a class row only. Returns True if it existed."""
        pass
