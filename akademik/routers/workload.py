# akademik/routers/workload.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.workload_schemas import TeacherWorkload, TeacherWorkloadDetails, WorkloadStatus, WorkloadSummary
from ..services.workload_service import WorkloadService

router = APIRouter(prefix="/api/v1/workload", tags=["Workload"])

@router.get("/academic-year/{academic_year_id}", response_model=List[TeacherWorkload])
async def get_all_teacher_workloads(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    """Workload of every teacher with an assignment in the academic year"""
    service = WorkloadService(db)
    return await service.get_all_teacher_workloads(academic_year_id)

@router.get("/academic-year/{academic_year_id}/summary", response_model=WorkloadSummary)
async def get_workload_summary(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = WorkloadService(db)
    return await service.get_workload_summary(academic_year_id)

@router.get("/academic-year/{academic_year_id}/status/{workload_status}", response_model=List[TeacherWorkload])
async def get_teachers_by_status(
    academic_year_id: int,
    workload_status: WorkloadStatus,
    db: AsyncSession = Depends(get_db)
):
    service = WorkloadService(db)
    return await service.get_teachers_by_status(academic_year_id, workload_status)

@router.get("/academic-year/{academic_year_id}/teacher/{teacher_id}", response_model=TeacherWorkload)
async def get_teacher_workload(academic_year_id: int, teacher_id: int, db: AsyncSession = Depends(get_db)):
    service = WorkloadService(db)
    return await service.calculate_teacher_workload(teacher_id, academic_year_id)

@router.get("/academic-year/{academic_year_id}/teacher/{teacher_id}/details", response_model=TeacherWorkloadDetails)
async def get_teacher_workload_details(academic_year_id: int, teacher_id: int, db: AsyncSession = Depends(get_db)):
    service = WorkloadService(db)
    return await service.get_teacher_workload_details(teacher_id, academic_year_id)
