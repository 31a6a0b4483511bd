# akademik/services/task_assignment_service.py
from typing import Dict, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from .base_service import BaseService
from ..core.exceptions import NotFoundError
from ..models.academic_year import AcademicYear
from ..models.teacher import Teacher
from ..models.additional_task import AdditionalTask
from ..models.task_assignment import TaskAssignment
from ..schemas.assignment_schemas import TaskAllocationChartItem, TaskAssignmentCreate, TaskChartTeacher
from .workload_service import to_decimal

logger = logging.getLogger(__name__)

REFERENCES = (
    ("academic_year_id", AcademicYear, "Academic year"),
    ("teacher_id", Teacher, "Teacher"),
    ("task_id", AdditionalTask, "Additional task"),
)


class TaskAssignmentService(BaseService[TaskAssignment]):
    def __init__(self, db: AsyncSession):
        super().__init__(TaskAssignment, db)

    async def _ensure_references(self, values: dict):
        for field, model, label in REFERENCES:
            ref_id = values.get(field)
            if ref_id is not None and not await self.db.get(model, ref_id):
                raise NotFoundError(label, ref_id)

    async def create_assignment(self, obj_in: TaskAssignmentCreate) -> TaskAssignment:
        data = obj_in.model_dump()
        try:
            await self._ensure_references(data)
            return await self.create(data)
        except Exception as e:
            logger.error(f"Task assignment creation failed: {e}")
            raise

    async def update_assignment(self, id: int, obj_in: dict) -> TaskAssignment:
        assignment = await self.get(id)
        if not assignment:
            raise NotFoundError("Task assignment", id)
        changed = {key: value for key, value in obj_in.items() if getattr(assignment, key) != value}
        await self._ensure_references(changed)
        return await self.update(id, obj_in)

    async def get_by_academic_year(self, academic_year_id: int) -> List[TaskAssignment]:
        stmt = select(self.model).where(
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_by_teacher(self, teacher_id: int, academic_year_id: int) -> List[TaskAssignment]:
        stmt = select(self.model).where(
            self.model.teacher_id == teacher_id,
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_allocation_chart_data(self, academic_year_id: int) -> List[TaskAllocationChartItem]:
        """Per task: how many teachers carry it and the JP it adds up to"""
        stmt = (
            select(
                AdditionalTask.id.label("task_id"),
                AdditionalTask.name.label("task_name"),
                AdditionalTask.jp_equivalent,
                Teacher.id.label("teacher_id"),
                Teacher.name.label("teacher_name"),
                self.model.description,
            )
            .select_from(self.model)
            .join(AdditionalTask, self.model.task_id == AdditionalTask.id)
            .join(Teacher, self.model.teacher_id == Teacher.id)
            .where(self.model.academic_year_id == academic_year_id)
            .order_by(self.model.id)
        )
        result = await self.db.execute(stmt)

        grouped: Dict[int, dict] = {}
        for row in result.all():
            entry = grouped.setdefault(row.task_id, {
                "task_name": row.task_name,
                "jp_equivalent": to_decimal(row.jp_equivalent),
                "teachers": [],
            })
            entry["teachers"].append(TaskChartTeacher(
                teacher_id=row.teacher_id,
                teacher_name=row.teacher_name,
                description=row.description,
            ))

        return [
            TaskAllocationChartItem(
                task_name=entry["task_name"],
                task_equivalent=float(entry["jp_equivalent"]),
                assigned_count=len(entry["teachers"]),
                total_equivalent=float(entry["jp_equivalent"] * len(entry["teachers"])),
                teachers=entry["teachers"],
            )
            for entry in grouped.values()
        ]
