# akademik/routers/academic_years.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.master_schemas import AcademicYear, AcademicYearCreate, AcademicYearUpdate
from ..services.academic_year_service import AcademicYearService

router = APIRouter(prefix="/api/v1/academic-years", tags=["Master Data - Academic Years"])

@router.post("/", response_model=AcademicYear, status_code=status.HTTP_201_CREATED)
async def create_academic_year(academic_year: AcademicYearCreate, db: AsyncSession = Depends(get_db)):
    service = AcademicYearService(db)
    return await service.create_academic_year(academic_year)

@router.get("/", response_model=List[AcademicYear])
async def get_academic_years(db: AsyncSession = Depends(get_db)):
    service = AcademicYearService(db)
    return await service.get_all()

@router.get("/active", response_model=Optional[AcademicYear])
async def get_active_academic_year(db: AsyncSession = Depends(get_db)):
    """The currently active academic year, or null"""
    service = AcademicYearService(db)
    return await service.get_active()

@router.get("/{academic_year_id}", response_model=AcademicYear)
async def get_academic_year(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = AcademicYearService(db)
    return await service.get_or_404(academic_year_id)

@router.put("/{academic_year_id}", response_model=AcademicYear)
async def update_academic_year(
    academic_year_id: int,
    academic_year: AcademicYearUpdate,
    db: AsyncSession = Depends(get_db)
):
    service = AcademicYearService(db)
    return await service.update_academic_year(academic_year_id, academic_year.model_dump(exclude_unset=True))

@router.post("/{academic_year_id}/activate", response_model=AcademicYear)
async def set_active_academic_year(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    """Make this the only active academic year"""
    service = AcademicYearService(db)
    return await service.set_active(academic_year_id)

@router.delete("/{academic_year_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_academic_year(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = AcademicYearService(db)
    if not await service.delete(academic_year_id):
        raise HTTPException(status_code=404, detail=f"Academic year with id {academic_year_id} not found")
