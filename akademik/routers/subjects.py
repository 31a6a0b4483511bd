# akademik/routers/subjects.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.master_schemas import Subject, SubjectCreate, SubjectUpdate
from ..services.subject_service import SubjectService

router = APIRouter(prefix="/api/v1/subjects", tags=["Master Data - Subjects"])

@router.post("/", response_model=Subject, status_code=status.HTTP_201_CREATED)
async def create_subject(subject: SubjectCreate, db: AsyncSession = Depends(get_db)):
    service = SubjectService(db)
    return await service.create(subject.model_dump())

@router.get("/", response_model=List[Subject])
async def get_subjects(db: AsyncSession = Depends(get_db)):
    service = SubjectService(db)
    return await service.get_multi(order_by=service.model.code)

@router.get("/by-code/{code}", response_model=Subject)
async def get_subject_by_code(code: str, db: AsyncSession = Depends(get_db)):
    service = SubjectService(db)
    subject = await service.get_by_code(code)
    if not subject:
        raise HTTPException(status_code=404, detail=f"Subject with code {code} not found")
    return subject

@router.get("/{subject_id}", response_model=Subject)
async def get_subject(subject_id: int, db: AsyncSession = Depends(get_db)):
    service = SubjectService(db)
    subject = await service.get(subject_id)
    if not subject:
        raise HTTPException(status_code=404, detail=f"Subject with id {subject_id} not found")
    return subject

@router.put("/{subject_id}", response_model=Subject)
async def update_subject(subject_id: int, subject: SubjectUpdate, db: AsyncSession = Depends(get_db)):
    service = SubjectService(db)
    db_subject = await service.update(subject_id, subject.model_dump(exclude_unset=True))
    if not db_subject:
        raise HTTPException(status_code=404, detail=f"Subject with id {subject_id} not found")
    return db_subject

@router.delete("/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subject(subject_id: int, db: AsyncSession = Depends(get_db)):
    service = SubjectService(db)
    if not await service.delete(subject_id):
        raise HTTPException(status_code=404, detail=f"Subject with id {subject_id} not found")
