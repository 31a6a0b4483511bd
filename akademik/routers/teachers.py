# akademik/routers/teachers.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.master_schemas import Teacher, TeacherCreate, TeacherUpdate
from ..schemas.pagination import PaginatedResponse
from ..services.teacher_service import TeacherService

router = APIRouter(prefix="/api/v1/teachers", tags=["Master Data - Teachers"])

@router.post("/", response_model=Teacher, status_code=status.HTTP_201_CREATED)
async def create_teacher(teacher: TeacherCreate, db: AsyncSession = Depends(get_db)):
    service = TeacherService(db)
    return await service.create(teacher.model_dump())

@router.get("/", response_model=PaginatedResponse[Teacher])
async def get_teachers(
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Get teachers ordered by name"""
    service = TeacherService(db)
    return await service.get_teachers_paginated(page=page, size=size)

@router.get("/by-nip/{nip_nuptk}", response_model=Teacher)
async def get_teacher_by_nip(nip_nuptk: str, db: AsyncSession = Depends(get_db)):
    service = TeacherService(db)
    teacher = await service.get_by_nip(nip_nuptk)
    if not teacher:
        raise HTTPException(status_code=404, detail=f"Teacher with NIP/NUPTK {nip_nuptk} not found")
    return teacher

@router.get("/{teacher_id}", response_model=Teacher)
async def get_teacher(teacher_id: int, db: AsyncSession = Depends(get_db)):
    service = TeacherService(db)
    teacher = await service.get(teacher_id)
    if not teacher:
        raise HTTPException(status_code=404, detail=f"Teacher with id {teacher_id} not found")
    return teacher

@router.put("/{teacher_id}", response_model=Teacher)
async def update_teacher(teacher_id: int, teacher: TeacherUpdate, db: AsyncSession = Depends(get_db)):
    service = TeacherService(db)
    db_teacher = await service.update(teacher_id, teacher.model_dump(exclude_unset=True))
    if not db_teacher:
        raise HTTPException(status_code=404, detail=f"Teacher with id {teacher_id} not found")
    return db_teacher

@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(teacher_id: int, db: AsyncSession = Depends(get_db)):
    service = TeacherService(db)
    if not await service.delete(teacher_id):
        raise HTTPException(status_code=404, detail=f"Teacher with id {teacher_id} not found")
