# akademik/schemas/workload_schemas.py
"""Computed teacher workload. Never persisted."""
from enum import Enum
from typing import List, Literal, Optional
from pydantic import BaseModel


class WorkloadStatus(str, Enum):
    LAYAK = "layak"    # within range
    LEBIH = "lebih"    # above maximum
    KURANG = "kurang"  # below minimum


class WorkloadDetail(BaseModel):
    type: Literal["jtm", "task"]
    subject_name: Optional[str] = None
    class_name: Optional[str] = None
    task_name: Optional[str] = None
    hours: float


class TeacherWorkload(BaseModel):
    teacher_id: int
    teacher_name: str
    total_jtm_hours: int
    total_task_equivalent: float
    total_workload: float
    status: WorkloadStatus
    details: List[WorkloadDetail] = []


class WorkloadSummary(BaseModel):
    total_teachers: int
    layak_count: int
    lebih_count: int
    kurang_count: int
    average_workload: float


class WorkloadTeacher(BaseModel):
    id: int
    name: str
    nip_nuptk: str

class WorkloadJtmRow(BaseModel):
    subject_name: str
    class_name: str
    allocated_hours: int

class WorkloadTaskRow(BaseModel):
    task_name: str
    jp_equivalent: float
    description: Optional[str] = None

class WorkloadBreakdown(BaseModel):
    total_jtm: int
    total_tasks: float
    total_workload: float
    status: WorkloadStatus
    minimum_required: int
    surplus_deficit: float

class TeacherWorkloadDetails(BaseModel):
    teacher: WorkloadTeacher
    jtm_assignments: List[WorkloadJtmRow] = []
    task_assignments: List[WorkloadTaskRow] = []
    summary: WorkloadBreakdown
