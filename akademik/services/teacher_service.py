# akademik/services/teacher_service.py
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .base_service import BaseService
from ..models.teacher import Teacher

class TeacherService(BaseService[Teacher]):
    def __init__(self, db: AsyncSession):
        super().__init__(Teacher, db)

    async def get_by_nip(self, nip_nuptk: str) -> Optional[Teacher]:
        """Get teacher by NIP/NUPTK"""
        stmt = select(self.model).where(self.model.nip_nuptk == nip_nuptk)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def get_teachers_paginated(self, page: int = 1, size: int = 20) -> dict:
        """Get teachers ordered by name, one page at a time"""
        return await self.get_paginated(page=page, size=size, order_by="name")
