# akademik/schemas/master_schemas.py
"""Request/response schemas for schools, teachers, academic years, subjects, classes and tasks."""
from typing import ClassVar, FrozenSet, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_serializer, model_validator


class RecordRead(BaseModel):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PartialUpdate(BaseModel):
    """Update body: fields may be left out, but only the columns in
    ``nullable_fields`` accept an explicit null."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def reject_explicit_nulls(cls, data):
        if isinstance(data, dict):
            nulls = sorted(
                key for key, value in data.items()
                if value is None and key in cls.model_fields and key not in cls.nullable_fields
            )
            if nulls:
                raise ValueError(f"{', '.join(nulls)} cannot be null")
        return data


# Schools

class SchoolBase(BaseModel):
    name: str = Field(..., min_length=1)
    npsn: str = Field(..., min_length=1, max_length=20)
    address: str
    principal_name: str
    principal_nip: str = Field(..., max_length=30)
    logo_url: Optional[str] = None
    letterhead_url: Optional[str] = None

class SchoolCreate(SchoolBase):
    pass

class SchoolUpdate(PartialUpdate):
    nullable_fields = frozenset({"logo_url", "letterhead_url"})

    name: Optional[str] = Field(default=None, min_length=1)
    npsn: Optional[str] = Field(default=None, min_length=1, max_length=20)
    address: Optional[str] = None
    principal_name: Optional[str] = None
    principal_nip: Optional[str] = Field(default=None, max_length=30)
    logo_url: Optional[str] = None
    letterhead_url: Optional[str] = None

class School(SchoolBase, RecordRead):
    pass


# Teachers

class TeacherBase(BaseModel):
    name: str = Field(..., min_length=1)
    nip_nuptk: str = Field(..., min_length=1, max_length=30)
    tmt: datetime
    education: str

class TeacherCreate(TeacherBase):
    pass

class TeacherUpdate(PartialUpdate):
    name: Optional[str] = Field(default=None, min_length=1)
    nip_nuptk: Optional[str] = Field(default=None, min_length=1, max_length=30)
    tmt: Optional[datetime] = None
    education: Optional[str] = None

class Teacher(TeacherBase, RecordRead):
    pass


# Academic years

class AcademicYearBase(BaseModel):
    year: str = Field(..., min_length=1, max_length=9)
    semester: int = Field(..., ge=1, le=2)
    curriculum: str
    total_time_allocation: int = Field(..., gt=0)

class AcademicYearCreate(AcademicYearBase):
    is_active: bool = False

class AcademicYearUpdate(PartialUpdate):
    year: Optional[str] = Field(default=None, min_length=1, max_length=9)
    semester: Optional[int] = Field(default=None, ge=1, le=2)
    curriculum: Optional[str] = None
    total_time_allocation: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None

class AcademicYear(AcademicYearBase, RecordRead):
    is_active: bool


# Subjects

class SubjectBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1)
    time_allocation: int = Field(..., gt=0)

class SubjectCreate(SubjectBase):
    pass

class SubjectUpdate(PartialUpdate):
    code: Optional[str] = Field(default=None, min_length=1, max_length=20)
    name: Optional[str] = Field(default=None, min_length=1)
    time_allocation: Optional[int] = Field(default=None, gt=0)

class Subject(SubjectBase, RecordRead):
    pass


# Classes

class ClassBase(BaseModel):
    grade_level: int = Field(..., ge=7, le=9)
    rombel: str = Field(..., min_length=1, max_length=10)
    class_name: str = Field(..., min_length=1, max_length=50)
    academic_year_id: int

class ClassCreate(ClassBase):
    pass

class ClassUpdate(PartialUpdate):
    grade_level: Optional[int] = Field(default=None, ge=7, le=9)
    rombel: Optional[str] = Field(default=None, min_length=1, max_length=10)
    class_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    academic_year_id: Optional[int] = None

class Class(ClassBase, RecordRead):
    pass


# Additional tasks

class AdditionalTaskBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: str
    jp_equivalent: Decimal = Field(..., gt=0, max_digits=4, decimal_places=2)

class AdditionalTaskCreate(AdditionalTaskBase):
    pass

class AdditionalTaskUpdate(PartialUpdate):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    jp_equivalent: Optional[Decimal] = Field(default=None, gt=0, max_digits=4, decimal_places=2)

class AdditionalTask(AdditionalTaskBase, RecordRead):

    @field_serializer("jp_equivalent")
    def serialize_jp(self, value: Decimal) -> float:
        return float(value)
