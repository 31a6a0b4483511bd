# akademik/routers/additional_tasks.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.master_schemas import AdditionalTask, AdditionalTaskCreate, AdditionalTaskUpdate
from ..services.additional_task_service import AdditionalTaskService

router = APIRouter(prefix="/api/v1/additional-tasks", tags=["Master Data - Additional Tasks"])

@router.post("/", response_model=AdditionalTask, status_code=status.HTTP_201_CREATED)
async def create_additional_task(task: AdditionalTaskCreate, db: AsyncSession = Depends(get_db)):
    service = AdditionalTaskService(db)
    return await service.create_task(task)

@router.get("/", response_model=List[AdditionalTask])
async def get_additional_tasks(db: AsyncSession = Depends(get_db)):
    service = AdditionalTaskService(db)
    return await service.get_multi()

@router.get("/{task_id}", response_model=AdditionalTask)
async def get_additional_task(task_id: int, db: AsyncSession = Depends(get_db)):
    service = AdditionalTaskService(db)
    task = await service.get(task_id)
    if not task:
        raise HTTPException(status_code=404, detail=f"Additional task with id {task_id} not found")
    return task

@router.put("/{task_id}", response_model=AdditionalTask)
async def update_additional_task(task_id: int, task: AdditionalTaskUpdate, db: AsyncSession = Depends(get_db)):
    service = AdditionalTaskService(db)
    db_task = await service.update_task(task_id, task.model_dump(exclude_unset=True))
    if not db_task:
        raise HTTPException(status_code=404, detail=f"Additional task with id {task_id} not found")
    return db_task

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_additional_task(task_id: int, db: AsyncSession = Depends(get_db)):
    service = AdditionalTaskService(db)
    if not await service.delete(task_id):
        raise HTTPException(status_code=404, detail=f"Additional task with id {task_id} not found")
