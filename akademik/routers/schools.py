# akademik/routers/schools.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.master_schemas import School, SchoolCreate, SchoolUpdate
from ..services.school_service import SchoolService

router = APIRouter(prefix="/api/v1/schools", tags=["Master Data - Schools"])

@router.post("/", response_model=School, status_code=status.HTTP_201_CREATED)
async def create_school(school: SchoolCreate, db: AsyncSession = Depends(get_db)):
    service = SchoolService(db)
    return await service.create(school.model_dump())

@router.get("/", response_model=List[School])
async def get_schools(db: AsyncSession = Depends(get_db)):
    service = SchoolService(db)
    return await service.get_multi()

@router.get("/{school_id}", response_model=School)
async def get_school(school_id: int, db: AsyncSession = Depends(get_db)):
    service = SchoolService(db)
    school = await service.get(school_id)
    if not school:
        raise HTTPException(status_code=404, detail=f"School with id {school_id} not found")
    return school

@router.put("/{school_id}", response_model=School)
async def update_school(school_id: int, school: SchoolUpdate, db: AsyncSession = Depends(get_db)):
    service = SchoolService(db)
    db_school = await service.update(school_id, school.model_dump(exclude_unset=True))
    if not db_school:
        raise HTTPException(status_code=404, detail=f"School with id {school_id} not found")
    return db_school

@router.delete("/{school_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_school(school_id: int, db: AsyncSession = Depends(get_db)):
    service = SchoolService(db)
    if not await service.delete(school_id):
        raise HTTPException(status_code=404, detail=f"School with id {school_id} not found")
