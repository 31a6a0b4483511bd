# akademik/services/report_service.py
"""Report data for workload, JTM allocation and task allocation.

Rendering is not done here: each report returns the URL the exported file
would be published under together with the data that goes into it.
"""
from typing import Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from ..models.academic_year import AcademicYear
from ..models.teacher import Teacher
from ..models.subject import Subject
from ..models.class_model import ClassModel
from ..models.additional_task import AdditionalTask
from ..models.jtm_assignment import JtmAssignment
from ..models.task_assignment import TaskAssignment
from ..schemas.report_schemas import (
    FilterClass, FilterSubject, FilterTeacher, ReportFilters, ReportFormat, ReportResult,
)
from .workload_service import WorkloadService, to_decimal

logger = logging.getLogger(__name__)

ACADEMIC_YEAR_NOT_FOUND = "Academic year not found"


def _academic_year_data(academic_year: AcademicYear) -> dict:
    return {
        "id": academic_year.id,
        "year": academic_year.year,
        "semester": academic_year.semester,
        "curriculum": academic_year.curriculum,
        "total_time_allocation": academic_year.total_time_allocation,
    }


def _allocation_status(total_allocated: int, base_allocation: int) -> str:
    if total_allocated > base_allocation:
        return "over"
    if total_allocated < base_allocation:
        return "under"
    return "complete"


class ReportService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.workloads = WorkloadService(db)

    async def _academic_year(self, academic_year_id: int) -> Optional[AcademicYear]:
        return await self.db.get(AcademicYear, academic_year_id)

    async def generate_workload_report(
        self, academic_year_id: int, format: ReportFormat = ReportFormat.PDF
    ) -> ReportResult:
        academic_year = await self._academic_year(academic_year_id)
        if not academic_year:
            return ReportResult(success=False, error=ACADEMIC_YEAR_NOT_FOUND)

        workloads = await self.workloads.get_all_teacher_workloads(academic_year_id)
        workload_summary = []
        for workload in workloads:
            details = [detail.model_dump(exclude_none=True) for detail in workload.details]
            workload_summary.append({
                "teacher_id": workload.teacher_id,
                "teacher_name": workload.teacher_name,
                "total_jtm_hours": workload.total_jtm_hours,
                "total_task_equivalent": workload.total_task_equivalent,
                "total_workload": workload.total_workload,
                "status": workload.status.value,
                "jtm_details": [detail for detail in details if detail["type"] == "jtm"],
                "task_details": [detail for detail in details if detail["type"] == "task"],
            })

        logger.info(f"Workload report prepared for academic year {academic_year_id} ({len(workload_summary)} teachers)")
        return ReportResult(
            success=True,
            report_url=f"/reports/workload-{academic_year_id}.{format.value}",
            data={
                "academic_year": _academic_year_data(academic_year),
                "workload_summary": workload_summary,
            },
        )

    async def generate_jtm_allocation_report(
        self, academic_year_id: int, format: ReportFormat = ReportFormat.PDF
    ) -> ReportResult:
        """Allocated hours per (class, subject) against the subject's base allocation"""
        academic_year = await self._academic_year(academic_year_id)
        if not academic_year:
            return ReportResult(success=False, error=ACADEMIC_YEAR_NOT_FOUND)

        result = await self.db.execute(
            select(
                JtmAssignment.class_id,
                ClassModel.class_name,
                JtmAssignment.subject_id,
                Subject.name.label("subject_name"),
                Subject.time_allocation,
                JtmAssignment.allocated_hours,
            )
            .select_from(JtmAssignment)
            .join(ClassModel, JtmAssignment.class_id == ClassModel.id)
            .join(Subject, JtmAssignment.subject_id == Subject.id)
            .where(JtmAssignment.academic_year_id == academic_year_id)
            .order_by(JtmAssignment.id)
        )
        rows = result.all()

        grouped: Dict[tuple, dict] = {}
        for row in rows:
            entry = grouped.setdefault((row.class_id, row.subject_id), {
                "class_id": row.class_id,
                "class_name": row.class_name,
                "subject_id": row.subject_id,
                "subject_name": row.subject_name,
                "base_time_allocation": row.time_allocation,
                "total_allocated": 0,
            })
            entry["total_allocated"] += row.allocated_hours

        for entry in grouped.values():
            entry["difference"] = entry["total_allocated"] - entry["base_time_allocation"]
            entry["allocation_status"] = _allocation_status(entry["total_allocated"], entry["base_time_allocation"])

        return ReportResult(
            success=True,
            report_url=f"/reports/jtm-allocation-{academic_year_id}.{format.value}",
            data={
                "academic_year": _academic_year_data(academic_year),
                "total_assignments": len(rows),
                "allocation_summary": list(grouped.values()),
            },
        )

    async def generate_task_allocation_report(
        self, academic_year_id: int, format: ReportFormat = ReportFormat.PDF
    ) -> ReportResult:
        academic_year = await self._academic_year(academic_year_id)
        if not academic_year:
            return ReportResult(success=False, error=ACADEMIC_YEAR_NOT_FOUND)

        result = await self.db.execute(
            select(
                TaskAssignment.teacher_id,
                Teacher.name.label("teacher_name"),
                TaskAssignment.task_id,
                AdditionalTask.name.label("task_name"),
                AdditionalTask.jp_equivalent,
                TaskAssignment.description,
            )
            .select_from(TaskAssignment)
            .join(Teacher, TaskAssignment.teacher_id == Teacher.id)
            .join(AdditionalTask, TaskAssignment.task_id == AdditionalTask.id)
            .where(TaskAssignment.academic_year_id == academic_year_id)
            .order_by(TaskAssignment.id)
        )
        rows = result.all()

        task_assignments = []
        grouped: Dict[int, dict] = {}
        for row in rows:
            assignment = {
                "teacher_id": row.teacher_id,
                "teacher_name": row.teacher_name,
                "task_name": row.task_name,
                "jp_equivalent": float(row.jp_equivalent),
                "description": row.description,
            }
            task_assignments.append(assignment)

            entry = grouped.setdefault(row.task_id, {"task_name": row.task_name, "total_jp": to_decimal(0), "assignments": []})
            entry["total_jp"] += to_decimal(row.jp_equivalent)
            entry["assignments"].append(assignment)

        task_summary = [
            {
                "task_name": entry["task_name"],
                "assigned_count": len(entry["assignments"]),
                "total_jp": float(entry["total_jp"]),
                "assignments": entry["assignments"],
            }
            for entry in grouped.values()
        ]

        return ReportResult(
            success=True,
            report_url=f"/reports/task-allocation-{academic_year_id}.{format.value}",
            data={
                "academic_year": _academic_year_data(academic_year),
                "total_assignments": len(rows),
                "task_assignments": task_assignments,
                "task_summary": task_summary,
            },
        )

    async def get_report_filters(self, academic_year_id: int) -> ReportFilters:
        """Classes of the year plus the teachers and subjects its JTM assignments use"""
        classes_result = await self.db.execute(
            select(ClassModel)
            .where(ClassModel.academic_year_id == academic_year_id)
            .order_by(ClassModel.id)
        )
        teachers_result = await self.db.execute(
            select(Teacher)
            .where(Teacher.id.in_(
                select(JtmAssignment.teacher_id).where(JtmAssignment.academic_year_id == academic_year_id)
            ))
            .order_by(Teacher.id)
        )
        subjects_result = await self.db.execute(
            select(Subject)
            .where(Subject.id.in_(
                select(JtmAssignment.subject_id).where(JtmAssignment.academic_year_id == academic_year_id)
            ))
            .order_by(Subject.id)
        )

        return ReportFilters(
            classes=[
                FilterClass(id=c.id, name=c.class_name, grade_level=c.grade_level)
                for c in classes_result.scalars().all()
            ],
            teachers=[
                FilterTeacher(id=t.id, name=t.name, nip_nuptk=t.nip_nuptk)
                for t in teachers_result.scalars().all()
            ],
            subjects=[
                FilterSubject(id=s.id, name=s.name, code=s.code)
                for s in subjects_result.scalars().all()
            ],
        )
