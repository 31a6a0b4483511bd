# akademik/routers/classes.py
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.master_schemas import Class, ClassCreate, ClassUpdate
from ..services.class_service import ClassService

router = APIRouter(prefix="/api/v1/classes", tags=["Master Data - Classes"])

@router.post("/", response_model=Class, status_code=status.HTTP_201_CREATED)
async def create_class(class_data: ClassCreate, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    return await service.create_class(class_data)

@router.get("/", response_model=List[Class])
async def get_classes(
    academic_year_id: Optional[int] = Query(None),
    grade_level: Optional[int] = Query(None, ge=7, le=9),
    db: AsyncSession = Depends(get_db)
):
    """All classes, or the classes of one academic year"""
    service = ClassService(db)
    if academic_year_id is not None and grade_level is not None:
        return await service.get_by_grade_level(grade_level, academic_year_id)
    if academic_year_id is not None:
        return await service.get_by_academic_year(academic_year_id)
    return await service.get_multi(grade_level=grade_level)

@router.get("/{class_id}", response_model=Class)
async def get_class(class_id: int, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    class_obj = await service.get(class_id)
    if not class_obj:
        raise HTTPException(status_code=404, detail=f"Class with id {class_id} not found")
    return class_obj

@router.put("/{class_id}", response_model=Class)
async def update_class(class_id: int, class_data: ClassUpdate, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    return await service.update_class(class_id, class_data.model_dump(exclude_unset=True))

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(class_id: int, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    if not await service.delete(class_id):
        raise HTTPException(status_code=404, detail=f"Class with id {class_id} not found")
