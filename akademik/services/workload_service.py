# akademik/services/workload_service.py
"""Teacher workload aggregation.

A teacher's workload for an academic year is the sum of the JTM hours they
teach plus the JP equivalent of every additional task assigned to them. It is
recomputed from the assignment tables on every call and never stored.

Task equivalents are NUMERIC(4,2) in the database; sums are carried as
``Decimal`` and only converted to ``float`` when the response models are built.
"""
from decimal import Decimal
from typing import Dict, List, Sequence, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from ..core.exceptions import NotFoundError
from ..models.teacher import Teacher
from ..models.subject import Subject
from ..models.class_model import ClassModel
from ..models.additional_task import AdditionalTask
from ..models.jtm_assignment import JtmAssignment
from ..models.task_assignment import TaskAssignment
from ..schemas.workload_schemas import (
    TeacherWorkload, TeacherWorkloadDetails, WorkloadBreakdown, WorkloadDetail,
    WorkloadJtmRow, WorkloadStatus, WorkloadSummary, WorkloadTaskRow, WorkloadTeacher,
)

logger = logging.getLogger(__name__)

MIN_WORKLOAD_HOURS = 24
MAX_WORKLOAD_HOURS = 40

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def classify_workload(total_hours: Number) -> WorkloadStatus:
    """Both thresholds are inclusive on the layak side"""
    if total_hours < MIN_WORKLOAD_HOURS:
        return WorkloadStatus.KURANG
    if total_hours > MAX_WORKLOAD_HOURS:
        return WorkloadStatus.LEBIH
    return WorkloadStatus.LAYAK


class WorkloadService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_teacher(self, teacher_id: int) -> Teacher:
        teacher = await self.db.get(Teacher, teacher_id)
        if not teacher:
            raise NotFoundError("Teacher", teacher_id)
        return teacher

    async def _jtm_rows(self, teacher_id: int, academic_year_id: int) -> Sequence:
        stmt = (
            select(
                Subject.name.label("subject_name"),
                ClassModel.class_name,
                JtmAssignment.allocated_hours,
            )
            .select_from(JtmAssignment)
            .join(Subject, JtmAssignment.subject_id == Subject.id)
            .join(ClassModel, JtmAssignment.class_id == ClassModel.id)
            .where(
                JtmAssignment.teacher_id == teacher_id,
                JtmAssignment.academic_year_id == academic_year_id,
            )
            .order_by(JtmAssignment.id)
        )
        result = await self.db.execute(stmt)
        return result.all()

    async def _task_rows(self, teacher_id: int, academic_year_id: int) -> Sequence:
        stmt = (
            select(
                AdditionalTask.name.label("task_name"),
                AdditionalTask.jp_equivalent,
                TaskAssignment.description,
            )
            .select_from(TaskAssignment)
            .join(AdditionalTask, TaskAssignment.task_id == AdditionalTask.id)
            .where(
                TaskAssignment.teacher_id == teacher_id,
                TaskAssignment.academic_year_id == academic_year_id,
            )
            .order_by(TaskAssignment.id)
        )
        result = await self.db.execute(stmt)
        return result.all()

    async def calculate_teacher_workload(self, teacher_id: int, academic_year_id: int) -> TeacherWorkload:
        """Total workload of one teacher; an unknown academic year simply sums to zero"""
        try:
            teacher = await self._get_teacher(teacher_id)
            jtm_rows = await self._jtm_rows(teacher_id, academic_year_id)
            task_rows = await self._task_rows(teacher_id, academic_year_id)
        except Exception as e:
            logger.error(f"Calculate teacher workload failed: {e}")
            raise

        total_jtm_hours = sum(row.allocated_hours for row in jtm_rows)
        total_task_equivalent = sum((to_decimal(row.jp_equivalent) for row in task_rows), Decimal("0"))
        total_workload = total_jtm_hours + total_task_equivalent

        details = [
            WorkloadDetail(
                type="jtm",
                subject_name=row.subject_name,
                class_name=row.class_name,
                hours=row.allocated_hours,
            )
            for row in jtm_rows
        ]
        details.extend(
            WorkloadDetail(type="task", task_name=row.task_name, hours=float(row.jp_equivalent))
            for row in task_rows
        )

        return TeacherWorkload(
            teacher_id=teacher.id,
            teacher_name=teacher.name,
            total_jtm_hours=total_jtm_hours,
            total_task_equivalent=float(total_task_equivalent),
            total_workload=float(total_workload),
            status=classify_workload(total_workload),
            details=details,
        )

    async def _teacher_ids_for_year(self, academic_year_id: int) -> List[int]:
        """Teachers with any JTM or task assignment in the year, JTM teachers first"""
        jtm_result = await self.db.execute(
            select(JtmAssignment.teacher_id)
            .where(JtmAssignment.academic_year_id == academic_year_id)
            .order_by(JtmAssignment.id)
        )
        task_result = await self.db.execute(
            select(TaskAssignment.teacher_id)
            .where(TaskAssignment.academic_year_id == academic_year_id)
            .order_by(TaskAssignment.id)
        )
        ordered: Dict[int, None] = dict.fromkeys(jtm_result.scalars().all())
        ordered.update(dict.fromkeys(task_result.scalars().all()))
        return list(ordered)

    async def get_all_teacher_workloads(self, academic_year_id: int) -> List[TeacherWorkload]:
        try:
            teacher_ids = await self._teacher_ids_for_year(academic_year_id)
        except Exception as e:
            logger.error(f"Get all teacher workloads failed: {e}")
            raise
        return [
            await self.calculate_teacher_workload(teacher_id, academic_year_id)
            for teacher_id in teacher_ids
        ]

    async def get_teachers_by_status(self, academic_year_id: int, status: WorkloadStatus) -> List[TeacherWorkload]:
        workloads = await self.get_all_teacher_workloads(academic_year_id)
        return [workload for workload in workloads if workload.status == status]

    async def get_workload_summary(self, academic_year_id: int) -> WorkloadSummary:
        workloads = await self.get_all_teacher_workloads(academic_year_id)
        statuses = [workload.status for workload in workloads]

        average = 0.0
        if workloads:
            total = sum((to_decimal(workload.total_workload) for workload in workloads), Decimal("0"))
            average = float(total / len(workloads))

        return WorkloadSummary(
            total_teachers=len(workloads),
            layak_count=statuses.count(WorkloadStatus.LAYAK),
            lebih_count=statuses.count(WorkloadStatus.LEBIH),
            kurang_count=statuses.count(WorkloadStatus.KURANG),
            average_workload=average,
        )

    async def get_teacher_workload_details(self, teacher_id: int, academic_year_id: int) -> TeacherWorkloadDetails:
        try:
            teacher = await self._get_teacher(teacher_id)
            jtm_rows = await self._jtm_rows(teacher_id, academic_year_id)
            task_rows = await self._task_rows(teacher_id, academic_year_id)
        except Exception as e:
            logger.error(f"Get teacher workload details failed: {e}")
            raise

        total_jtm = sum(row.allocated_hours for row in jtm_rows)
        total_tasks = sum((to_decimal(row.jp_equivalent) for row in task_rows), Decimal("0"))
        total_workload = total_jtm + total_tasks

        return TeacherWorkloadDetails(
            teacher=WorkloadTeacher(id=teacher.id, name=teacher.name, nip_nuptk=teacher.nip_nuptk),
            jtm_assignments=[
                WorkloadJtmRow(
                    subject_name=row.subject_name,
                    class_name=row.class_name,
                    allocated_hours=row.allocated_hours,
                )
                for row in jtm_rows
            ],
            task_assignments=[
                WorkloadTaskRow(
                    task_name=row.task_name,
                    jp_equivalent=float(row.jp_equivalent),
                    description=row.description,
                )
                for row in task_rows
            ],
            summary=WorkloadBreakdown(
                total_jtm=total_jtm,
                total_tasks=float(total_tasks),
                total_workload=float(total_workload),
                status=classify_workload(total_workload),
                minimum_required=MIN_WORKLOAD_HOURS,
                surplus_deficit=float(total_workload - MIN_WORKLOAD_HOURS),
            ),
        )
