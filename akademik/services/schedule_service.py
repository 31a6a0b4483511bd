# akademik/services/schedule_service.py
"""Schedule templates, their time slots and manually entered schedule rows.

Automatic generation and conflict detection are not done here; entries are
stored as given once their references exist.
"""
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
import logging

from .base_service import BaseService
from ..core.exceptions import NotFoundError
from ..models.academic_year import AcademicYear
from ..models.class_model import ClassModel
from ..models.subject import Subject
from ..models.teacher import Teacher
from ..models.schedule import Schedule, ScheduleTemplate, TimeSlot
from ..schemas.schedule_schemas import ScheduleCreate, TimeSlotCreate

logger = logging.getLogger(__name__)

# Referenced rows checked on create/update, in this order. Subject and teacher may be empty.
SCHEDULE_REFERENCES = (
    ("academic_year_id", AcademicYear, "Academic year"),
    ("class_id", ClassModel, "Class"),
    ("template_id", ScheduleTemplate, "Schedule template"),
    ("subject_id", Subject, "Subject"),
    ("teacher_id", Teacher, "Teacher"),
)


class ScheduleTemplateService(BaseService[ScheduleTemplate]):
    def __init__(self, db: AsyncSession):
        super().__init__(ScheduleTemplate, db)

    async def update_template(self, id: int, obj_in: dict) -> ScheduleTemplate:
        template = await self.update(id, obj_in)
        if not template:
            raise NotFoundError("Schedule template", id)
        return template


class TimeSlotService(BaseService[TimeSlot]):
    def __init__(self, db: AsyncSession):
        super().__init__(TimeSlot, db)

    async def _ensure_template(self, template_id: int):
        if not await self.db.get(ScheduleTemplate, template_id):
            raise NotFoundError("Schedule template", template_id)

    async def create_time_slot(self, obj_in: TimeSlotCreate) -> TimeSlot:
        try:
            await self._ensure_template(obj_in.template_id)
            return await self.create(obj_in.model_dump())
        except Exception as e:
            logger.error(f"Time slot creation failed: {e}")
            raise

    async def get_by_template(self, template_id: int, day_of_week: Optional[int] = None) -> List[TimeSlot]:
        """Slots of a template in weekly order, optionally for one day"""
        stmt = select(self.model).where(self.model.template_id == template_id)
        if day_of_week is not None:
            stmt = stmt.where(self.model.day_of_week == day_of_week)
        stmt = stmt.order_by(self.model.day_of_week, self.model.jp_number, self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def update_time_slot(self, id: int, obj_in: dict) -> TimeSlot:
        time_slot = await self.get(id)
        if not time_slot:
            raise NotFoundError("Time slot", id)

        new_template_id = obj_in.get("template_id")
        if new_template_id is not None and new_template_id != time_slot.template_id:
            await self._ensure_template(new_template_id)

        return await self.update(id, obj_in)

    async def delete_by_template(self, template_id: int) -> bool:
        """Remove every slot of a template; False when there were none"""
        try:
            result = await self.db.execute(
                delete(self.model).where(self.model.template_id == template_id)
            )
            await self.db.commit()
        except Exception as e:
            logger.error(f"Deleting time slots of template {template_id} failed: {e}")
            await self.db.rollback()
            raise
        return result.rowcount > 0


class ScheduleService(BaseService[Schedule]):
    def __init__(self, db: AsyncSession):
        super().__init__(Schedule, db)

    async def _ensure_references(self, values: dict):
        for field, model, label in SCHEDULE_REFERENCES:
            ref_id = values.get(field)
            if ref_id is not None and not await self.db.get(model, ref_id):
                raise NotFoundError(label, ref_id)

    async def create_schedule(self, obj_in: ScheduleCreate) -> Schedule:
        data = obj_in.model_dump()
        try:
            await self._ensure_references(data)
            return await self.create(data)
        except Exception as e:
            logger.error(f"Schedule creation failed: {e}")
            raise

    async def update_schedule(self, id: int, obj_in: dict) -> Schedule:
        schedule = await self.get(id)
        if not schedule:
            raise NotFoundError("Schedule", id)
        changed = {key: value for key, value in obj_in.items() if getattr(schedule, key) != value}
        await self._ensure_references(changed)
        return await self.update(id, obj_in)

    async def get_by_class(self, class_id: int, academic_year_id: int) -> List[Schedule]:
        stmt = select(self.model).where(
            self.model.class_id == class_id,
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.day_of_week, self.model.jp_number, self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_by_teacher(self, teacher_id: int, academic_year_id: int) -> List[Schedule]:
        stmt = select(self.model).where(
            self.model.teacher_id == teacher_id,
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.day_of_week, self.model.jp_number, self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()
