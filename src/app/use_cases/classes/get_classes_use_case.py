from typing import List, Optional

from libs.result import Error, Result, Return
from src.app.services.aggregation import AttendanceAggregator, ClassWithStats
from src.app.services.unit_of_work import UnitOfWork


class GetClassesUseCase:
    """Class reads, always returned with enrollment count and attendance stats"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get(self, class_id: str) -> Result[ClassWithStats]:
        async with self.uow:
            school_class = await self.uow.classes.get_by_id(class_id)
            if school_class is None:
                return Return.err(Error("NOT_FOUND", "Class not found"))

            enriched = await AttendanceAggregator(self.uow).enrich_classes([school_class])
            return Return.ok(enriched[0])

    async def list(self, owner_id: Optional[str] = None) -> Result[List[ClassWithStats]]:
        """Every class, or only those created by owner_id"""
        async with self.uow:
            if owner_id is None:
                classes = await self.uow.classes.list_all()
            else:
                classes = await self.uow.classes.list_by_owner(owner_id)

            return Return.ok(await AttendanceAggregator(self.uow).enrich_classes(classes))
