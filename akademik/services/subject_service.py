# akademik/services/subject_service.py
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from .base_service import BaseService
from ..models.subject import Subject

class SubjectService(BaseService[Subject]):
    def __init__(self, db: AsyncSession):
        super().__init__(Subject, db)

    async def get_by_code(self, code: str) -> Optional[Subject]:
        stmt = select(self.model).where(self.model.code == code)
        result = await self.db.execute(stmt)
        return result.scalars().first()
