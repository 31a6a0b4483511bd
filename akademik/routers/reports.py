# akademik/routers/reports.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.report_schemas import ReportFilters, ReportFormat, ReportResult
from ..services.report_service import ReportService

router = APIRouter(prefix="/api/v1/reports", tags=["Reports"])

@router.get("/workload/{academic_year_id}", response_model=ReportResult)
async def generate_workload_report(
    academic_year_id: int,
    format: ReportFormat = Query(ReportFormat.PDF),
    db: AsyncSession = Depends(get_db)
):
    service = ReportService(db)
    return await service.generate_workload_report(academic_year_id, format)

@router.get("/jtm-allocation/{academic_year_id}", response_model=ReportResult)
async def generate_jtm_allocation_report(
    academic_year_id: int,
    format: ReportFormat = Query(ReportFormat.PDF),
    db: AsyncSession = Depends(get_db)
):
    service = ReportService(db)
    return await service.generate_jtm_allocation_report(academic_year_id, format)

@router.get("/task-allocation/{academic_year_id}", response_model=ReportResult)
async def generate_task_allocation_report(
    academic_year_id: int,
    format: ReportFormat = Query(ReportFormat.PDF),
    db: AsyncSession = Depends(get_db)
):
    service = ReportService(db)
    return await service.generate_task_allocation_report(academic_year_id, format)

@router.get("/filters/{academic_year_id}", response_model=ReportFilters)
async def get_report_filters(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = ReportService(db)
    return await service.get_report_filters(academic_year_id)
