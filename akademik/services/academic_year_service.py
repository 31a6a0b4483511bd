# akademik/services/academic_year_service.py
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
import logging

from .base_service import BaseService
from ..core.exceptions import NotFoundError
from ..models.academic_year import AcademicYear
from ..schemas.master_schemas import AcademicYearCreate

logger = logging.getLogger(__name__)

class AcademicYearService(BaseService[AcademicYear]):
    def __init__(self, db: AsyncSession):
        super().__init__(AcademicYear, db)

    async def get_all(self) -> List[AcademicYear]:
        """All academic years ordered by year then semester"""
        stmt = select(self.model).order_by(self.model.year, self.model.semester)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_active(self) -> Optional[AcademicYear]:
        stmt = select(self.model).where(self.model.is_active == True).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_or_404(self, id: int) -> AcademicYear:
        academic_year = await self.get(id)
        if not academic_year:
            raise NotFoundError("Academic year", id)
        return academic_year

    async def _deactivate_all(self, except_id: Optional[int] = None):
        stmt = update(self.model).where(self.model.is_active == True)
        if except_id is not None:
            stmt = stmt.where(self.model.id != except_id)
        await self.db.execute(stmt.values(is_active=False))

    async def create_academic_year(self, obj_in: AcademicYearCreate) -> AcademicYear:
        """Create an academic year; an active one replaces the current active year"""
        try:
            if obj_in.is_active:
                await self._deactivate_all()
            academic_year = self.model(**obj_in.model_dump())
            self.db.add(academic_year)
            await self.db.commit()
            await self.db.refresh(academic_year)
            return academic_year
        except Exception as e:
            logger.error(f"Academic year creation failed: {e}")
            await self.db.rollback()
            raise

    async def update_academic_year(self, id: int, obj_in: dict) -> AcademicYear:
        academic_year = await self.get_or_404(id)
        try:
            if obj_in.get("is_active"):
                await self._deactivate_all(except_id=id)
            for key, value in obj_in.items():
                setattr(academic_year, key, value)
            await self.db.commit()
            await self.db.refresh(academic_year)
            return academic_year
        except Exception as e:
            logger.error(f"Academic year update failed: {e}")
            await self.db.rollback()
            raise

    async def set_active(self, id: int) -> AcademicYear:
        """Deactivate every other year and activate this one in a single transaction"""
        academic_year = await self.get_or_404(id)
        try:
            await self._deactivate_all(except_id=id)
            await self.db.execute(
                update(self.model).where(self.model.id == id).values(is_active=True)
            )
            await self.db.commit()
        except Exception as e:
            logger.error(f"Setting active academic year {id} failed: {e}")
            await self.db.rollback()
            raise
        await self.db.refresh(academic_year)
        logger.info(f"Academic year {academic_year.year} semester {academic_year.semester} is now active")
        return academic_year
