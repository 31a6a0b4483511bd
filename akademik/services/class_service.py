# akademik/services/class_service.py
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from .base_service import BaseService
from ..core.exceptions import NotFoundError
from ..models.class_model import ClassModel
from ..models.academic_year import AcademicYear
from ..schemas.master_schemas import ClassCreate

logger = logging.getLogger(__name__)

class ClassService(BaseService[ClassModel]):
    def __init__(self, db: AsyncSession):
        super().__init__(ClassModel, db)

    async def _ensure_academic_year(self, academic_year_id: int):
        if not await self.db.get(AcademicYear, academic_year_id):
            raise NotFoundError("Academic year", academic_year_id)

    async def get_by_academic_year(self, academic_year_id: int) -> List[ClassModel]:
        """Get classes for an academic year in creation order"""
        stmt = select(self.model).where(
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_by_grade_level(self, grade_level: int, academic_year_id: int) -> List[ClassModel]:
        stmt = select(self.model).where(
            self.model.grade_level == grade_level,
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.rombel)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def create_class(self, obj_in: ClassCreate) -> ClassModel:
        """Create new class in an existing academic year"""
        await self._ensure_academic_year(obj_in.academic_year_id)
        return await self.create(obj_in.model_dump())

    async def update_class(self, id: int, obj_in: dict) -> ClassModel:
        class_obj = await self.get(id)
        if not class_obj:
            raise NotFoundError("Class", id)

        new_year_id = obj_in.get("academic_year_id")
        if new_year_id is not None and new_year_id != class_obj.academic_year_id:
            await self._ensure_academic_year(new_year_id)

        return await self.update(id, obj_in)
