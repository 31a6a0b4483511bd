# akademik/schemas/assignment_schemas.py
from typing import List, Optional
from pydantic import BaseModel, Field

from .master_schemas import PartialUpdate, RecordRead


class JtmAssignmentBase(BaseModel):
    academic_year_id: int
    teacher_id: int
    subject_id: int
    class_id: int
    allocated_hours: int = Field(..., gt=0)

class JtmAssignmentCreate(JtmAssignmentBase):
    pass

class JtmAssignmentUpdate(PartialUpdate):
    academic_year_id: Optional[int] = None
    teacher_id: Optional[int] = None
    subject_id: Optional[int] = None
    class_id: Optional[int] = None
    allocated_hours: Optional[int] = Field(default=None, gt=0)

class JtmAssignment(JtmAssignmentBase, RecordRead):
    pass


class AllocationValidation(BaseModel):
    is_valid: bool
    errors: List[str] = []
    warnings: List[str] = []


class SubjectAllocation(BaseModel):
    subject_id: int
    subject_name: str
    allocated_hours: int
    curriculum_hours: int

class ClassAllocationProgress(BaseModel):
    class_id: int
    class_name: str
    total_allocated: int
    curriculum_limit: int
    progress_percentage: float
    subjects: List[SubjectAllocation] = []


class TaskAssignmentBase(BaseModel):
    academic_year_id: int
    teacher_id: int
    task_id: int
    description: Optional[str] = None

class TaskAssignmentCreate(TaskAssignmentBase):
    pass

class TaskAssignmentUpdate(PartialUpdate):
    nullable_fields = frozenset({"description"})

    academic_year_id: Optional[int] = None
    teacher_id: Optional[int] = None
    task_id: Optional[int] = None
    description: Optional[str] = None

class TaskAssignment(TaskAssignmentBase, RecordRead):
    pass


class TaskChartTeacher(BaseModel):
    teacher_id: int
    teacher_name: str
    description: Optional[str] = None

class TaskAllocationChartItem(BaseModel):
    task_name: str
    task_equivalent: float
    assigned_count: int
    total_equivalent: float
    teachers: List[TaskChartTeacher] = []
