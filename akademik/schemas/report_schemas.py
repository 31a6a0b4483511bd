# akademik/schemas/report_schemas.py
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel


class ReportFormat(str, Enum):
    PDF = "pdf"
    EXCEL = "excel"


class ReportResult(BaseModel):
    success: bool
    report_url: Optional[str] = None
    error: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class FilterClass(BaseModel):
    id: int
    name: str
    grade_level: int

class FilterTeacher(BaseModel):
    id: int
    name: str
    nip_nuptk: str

class FilterSubject(BaseModel):
    id: int
    name: str
    code: str

class ReportFilters(BaseModel):
    classes: List[FilterClass] = []
    teachers: List[FilterTeacher] = []
    subjects: List[FilterSubject] = []
