# akademik/routers/task_assignments.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.assignment_schemas import (
    TaskAllocationChartItem, TaskAssignment, TaskAssignmentCreate, TaskAssignmentUpdate,
)
from ..services.task_assignment_service import TaskAssignmentService

router = APIRouter(prefix="/api/v1/task-assignments", tags=["Assignments - Additional Tasks"])

@router.post("/", response_model=TaskAssignment, status_code=status.HTTP_201_CREATED)
async def create_task_assignment(assignment: TaskAssignmentCreate, db: AsyncSession = Depends(get_db)):
    service = TaskAssignmentService(db)
    return await service.create_assignment(assignment)

@router.get("/academic-year/{academic_year_id}", response_model=List[TaskAssignment])
async def get_task_assignments_by_academic_year(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = TaskAssignmentService(db)
    return await service.get_by_academic_year(academic_year_id)

@router.get("/academic-year/{academic_year_id}/chart", response_model=List[TaskAllocationChartItem])
async def get_task_allocation_chart(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = TaskAssignmentService(db)
    return await service.get_allocation_chart_data(academic_year_id)

@router.get("/academic-year/{academic_year_id}/teacher/{teacher_id}", response_model=List[TaskAssignment])
async def get_task_assignments_by_teacher(academic_year_id: int, teacher_id: int, db: AsyncSession = Depends(get_db)):
    service = TaskAssignmentService(db)
    return await service.get_by_teacher(teacher_id, academic_year_id)

@router.get("/{assignment_id}", response_model=TaskAssignment)
async def get_task_assignment(assignment_id: int, db: AsyncSession = Depends(get_db)):
    service = TaskAssignmentService(db)
    assignment = await service.get(assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail=f"Task assignment with id {assignment_id} not found")
    return assignment

@router.put("/{assignment_id}", response_model=TaskAssignment)
async def update_task_assignment(assignment_id: int, assignment: TaskAssignmentUpdate, db: AsyncSession = Depends(get_db)):
    service = TaskAssignmentService(db)
    return await service.update_assignment(assignment_id, assignment.model_dump(exclude_unset=True))

@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task_assignment(assignment_id: int, db: AsyncSession = Depends(get_db)):
    service = TaskAssignmentService(db)
    if not await service.delete(assignment_id):
        raise HTTPException(status_code=404, detail=f"Task assignment with id {assignment_id} not found")
