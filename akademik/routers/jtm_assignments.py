# akademik/routers/jtm_assignments.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.assignment_schemas import (
    AllocationValidation, ClassAllocationProgress, JtmAssignment, JtmAssignmentCreate, JtmAssignmentUpdate,
)
from ..services.jtm_assignment_service import JtmAssignmentService

router = APIRouter(prefix="/api/v1/jtm-assignments", tags=["Assignments - JTM"])

@router.post("/", response_model=JtmAssignment, status_code=status.HTTP_201_CREATED)
async def create_jtm_assignment(assignment: JtmAssignmentCreate, db: AsyncSession = Depends(get_db)):
    """Create assignment. Limits are not enforced here; call /validate first."""
    service = JtmAssignmentService(db)
    return await service.create_assignment(assignment)

@router.post("/validate", response_model=AllocationValidation)
async def validate_jtm_assignment(assignment: JtmAssignmentCreate, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    return await service.validate_allocation(assignment)

@router.get("/academic-year/{academic_year_id}", response_model=List[JtmAssignment])
async def get_jtm_assignments_by_academic_year(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    return await service.get_by_academic_year(academic_year_id)

@router.get("/academic-year/{academic_year_id}/progress", response_model=List[ClassAllocationProgress])
async def get_jtm_allocation_progress(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    return await service.get_allocation_progress(academic_year_id)

@router.get("/academic-year/{academic_year_id}/teacher/{teacher_id}", response_model=List[JtmAssignment])
async def get_jtm_assignments_by_teacher(academic_year_id: int, teacher_id: int, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    return await service.get_by_teacher(teacher_id, academic_year_id)

@router.get("/academic-year/{academic_year_id}/class/{class_id}", response_model=List[JtmAssignment])
async def get_jtm_assignments_by_class(academic_year_id: int, class_id: int, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    return await service.get_by_class(class_id, academic_year_id)

@router.get("/{assignment_id}", response_model=JtmAssignment)
async def get_jtm_assignment(assignment_id: int, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    assignment = await service.get(assignment_id)
    if not assignment:
        raise HTTPException(status_code=404, detail=f"JTM assignment with id {assignment_id} not found")
    return assignment

@router.put("/{assignment_id}", response_model=JtmAssignment)
async def update_jtm_assignment(assignment_id: int, assignment: JtmAssignmentUpdate, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    return await service.update_assignment(assignment_id, assignment.model_dump(exclude_unset=True))

@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_jtm_assignment(assignment_id: int, db: AsyncSession = Depends(get_db)):
    service = JtmAssignmentService(db)
    if not await service.delete(assignment_id):
        raise HTTPException(status_code=404, detail=f"JTM assignment with id {assignment_id} not found")
