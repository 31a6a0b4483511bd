# akademik/services/jtm_assignment_service.py
"""JTM (teaching hour) assignments.

Creating an assignment only checks that the referenced rows exist.
``validate_allocation`` is a separate, read-only check against the academic
year's curriculum limit and for duplicate assignments; callers run it before
``create_assignment`` when they want those checks.
"""
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
import logging

from .base_service import BaseService
from ..core.exceptions import NotFoundError
from ..models.academic_year import AcademicYear
from ..models.teacher import Teacher
from ..models.subject import Subject
from ..models.class_model import ClassModel
from ..models.jtm_assignment import JtmAssignment
from ..schemas.assignment_schemas import (
    AllocationValidation, ClassAllocationProgress, JtmAssignmentCreate, SubjectAllocation,
)

logger = logging.getLogger(__name__)

SYSTEM_ERROR_MESSAGE = "Validation failed due to system error"

# Referenced rows checked on create/update, in this order.
REFERENCES = (
    ("academic_year_id", AcademicYear, "Academic year"),
    ("teacher_id", Teacher, "Teacher"),
    ("subject_id", Subject, "Subject"),
    ("class_id", ClassModel, "Class"),
)


class JtmAssignmentService(BaseService[JtmAssignment]):
    def __init__(self, db: AsyncSession):
        super().__init__(JtmAssignment, db)

    async def _ensure_references(self, values: dict):
        for field, model, label in REFERENCES:
            ref_id = values.get(field)
            if ref_id is not None and not await self.db.get(model, ref_id):
                raise NotFoundError(label, ref_id)

    async def create_assignment(self, obj_in: JtmAssignmentCreate) -> JtmAssignment:
        data = obj_in.model_dump()
        try:
            await self._ensure_references(data)
            return await self.create(data)
        except Exception as e:
            logger.error(f"JTM assignment creation failed: {e}")
            raise

    async def update_assignment(self, id: int, obj_in: dict) -> JtmAssignment:
        assignment = await self.get(id)
        if not assignment:
            raise NotFoundError("JTM assignment", id)
        changed = {key: value for key, value in obj_in.items() if getattr(assignment, key) != value}
        await self._ensure_references(changed)
        return await self.update(id, obj_in)

    async def get_by_academic_year(self, academic_year_id: int) -> List[JtmAssignment]:
        stmt = select(self.model).where(
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_by_teacher(self, teacher_id: int, academic_year_id: int) -> List[JtmAssignment]:
        stmt = select(self.model).where(
            self.model.teacher_id == teacher_id,
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def get_by_class(self, class_id: int, academic_year_id: int) -> List[JtmAssignment]:
        stmt = select(self.model).where(
            self.model.class_id == class_id,
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def _class_total(self, class_id: int, academic_year_id: int) -> int:
        stmt = select(func.coalesce(func.sum(self.model.allocated_hours), 0)).where(
            self.model.class_id == class_id,
            self.model.academic_year_id == academic_year_id
        )
        result = await self.db.execute(stmt)
        return int(result.scalar())

    async def _has_duplicate(self, obj_in: JtmAssignmentCreate) -> bool:
        stmt = select(self.model.id).where(
            self.model.academic_year_id == obj_in.academic_year_id,
            self.model.teacher_id == obj_in.teacher_id,
            self.model.subject_id == obj_in.subject_id,
            self.model.class_id == obj_in.class_id
        ).limit(1)
        result = await self.db.execute(stmt)
        return result.first() is not None

    async def validate_allocation(self, obj_in: JtmAssignmentCreate) -> AllocationValidation:
        """Check a proposed assignment against the curriculum limit and existing assignments"""
        errors: List[str] = []
        warnings: List[str] = []

        try:
            academic_year = await self.db.get(AcademicYear, obj_in.academic_year_id)
            if not academic_year:
                errors.append(f"Academic year with id {obj_in.academic_year_id} not found")
                return AllocationValidation(is_valid=False, errors=errors, warnings=warnings)

            limit = academic_year.total_time_allocation
            new_total = await self._class_total(obj_in.class_id, obj_in.academic_year_id) + obj_in.allocated_hours

            if new_total > limit:
                errors.append(
                    f"Total allocation ({new_total} hours) exceeds curriculum limit ({limit} hours) for this class"
                )
            elif new_total * 10 > limit * 9:
                warnings.append(
                    f"Total allocation ({new_total} hours) is approaching curriculum limit ({limit} hours)"
                )

            if await self._has_duplicate(obj_in):
                errors.append("This teacher is already assigned to teach this subject in this class")
        except Exception as e:
            logger.error(f"JTM allocation validation failed: {e}")
            return AllocationValidation(is_valid=False, errors=[SYSTEM_ERROR_MESSAGE], warnings=[])

        return AllocationValidation(is_valid=not errors, errors=errors, warnings=warnings)

    async def get_allocation_progress(self, academic_year_id: int) -> List[ClassAllocationProgress]:
        """Allocated JTM per class against the academic year's curriculum limit"""
        try:
            academic_year = await self.db.get(AcademicYear, academic_year_id)
            if not academic_year:
                raise NotFoundError("Academic year", academic_year_id)
            limit = academic_year.total_time_allocation

            classes_result = await self.db.execute(
                select(ClassModel)
                .where(ClassModel.academic_year_id == academic_year_id)
                .order_by(ClassModel.id)
            )
            progress = []
            for class_obj in classes_result.scalars().all():
                rows_result = await self.db.execute(
                    select(
                        self.model.subject_id,
                        Subject.name.label("subject_name"),
                        self.model.allocated_hours,
                        Subject.time_allocation,
                    )
                    .select_from(self.model)
                    .join(Subject, self.model.subject_id == Subject.id)
                    .where(
                        self.model.class_id == class_obj.id,
                        self.model.academic_year_id == academic_year_id
                    )
                    .order_by(self.model.id)
                )
                subjects = [
                    SubjectAllocation(
                        subject_id=row.subject_id,
                        subject_name=row.subject_name,
                        allocated_hours=row.allocated_hours,
                        curriculum_hours=row.time_allocation,
                    )
                    for row in rows_result.all()
                ]
                total_allocated = sum(subject.allocated_hours for subject in subjects)
                percentage = round(total_allocated / limit * 100, 2) if limit > 0 else 0

                progress.append(ClassAllocationProgress(
                    class_id=class_obj.id,
                    class_name=class_obj.class_name,
                    total_allocated=total_allocated,
                    curriculum_limit=limit,
                    progress_percentage=percentage,
                    subjects=subjects,
                ))
            return progress
        except Exception as e:
            logger.error(f"Get JTM allocation progress failed: {e}")
            raise
