# akademik/services/additional_task_service.py
from decimal import Decimal
from sqlalchemy.ext.asyncio import AsyncSession
from .base_service import BaseService
from ..models.additional_task import AdditionalTask
from ..schemas.master_schemas import AdditionalTaskCreate

TWO_PLACES = Decimal("0.01")

class AdditionalTaskService(BaseService[AdditionalTask]):
    def __init__(self, db: AsyncSession):
        super().__init__(AdditionalTask, db)

    async def create_task(self, obj_in: AdditionalTaskCreate) -> AdditionalTask:
        """Create a task; jp_equivalent is stored as NUMERIC(4,2)"""
        data = obj_in.model_dump()
        data["jp_equivalent"] = data["jp_equivalent"].quantize(TWO_PLACES)
        return await self.create(data)

    async def update_task(self, id: int, obj_in: dict):
        if obj_in.get("jp_equivalent") is not None:
            obj_in["jp_equivalent"] = obj_in["jp_equivalent"].quantize(TWO_PLACES)
        return await self.update(id, obj_in)
