# akademik/schemas/schedule_schemas.py
from typing import Optional
from pydantic import BaseModel, Field

from .master_schemas import PartialUpdate, RecordRead
from ..models.schedule import SlotType

HHMM_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


# Schedule templates

class ScheduleTemplateBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: str

class ScheduleTemplateCreate(ScheduleTemplateBase):
    pass

class ScheduleTemplateUpdate(PartialUpdate):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None

class ScheduleTemplate(ScheduleTemplateBase, RecordRead):
    pass


# Time slots

class TimeSlotBase(BaseModel):
    template_id: int
    day_of_week: int = Field(..., ge=1, le=5)
    jp_number: int = Field(..., gt=0)
    start_time: str = Field(..., pattern=HHMM_PATTERN)
    end_time: str = Field(..., pattern=HHMM_PATTERN)
    duration: int = Field(..., gt=0)
    slot_type: SlotType

class TimeSlotCreate(TimeSlotBase):
    pass

class TimeSlotUpdate(PartialUpdate):
    template_id: Optional[int] = None
    day_of_week: Optional[int] = Field(default=None, ge=1, le=5)
    jp_number: Optional[int] = Field(default=None, gt=0)
    start_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=HHMM_PATTERN)
    duration: Optional[int] = Field(default=None, gt=0)
    slot_type: Optional[SlotType] = None

class TimeSlot(TimeSlotBase, RecordRead):
    pass


# Schedule entries

class ScheduleBase(BaseModel):
    academic_year_id: int
    class_id: int
    template_id: int
    day_of_week: int = Field(..., ge=1, le=5)
    jp_number: int = Field(..., gt=0)
    subject_id: Optional[int] = None
    teacher_id: Optional[int] = None
    is_manual: bool

class ScheduleCreate(ScheduleBase):
    is_cached: bool = True

class ScheduleUpdate(PartialUpdate):
    nullable_fields = frozenset({"subject_id", "teacher_id"})

    academic_year_id: Optional[int] = None
    class_id: Optional[int] = None
    template_id: Optional[int] = None
    day_of_week: Optional[int] = Field(default=None, ge=1, le=5)
    jp_number: Optional[int] = Field(default=None, gt=0)
    subject_id: Optional[int] = None
    teacher_id: Optional[int] = None
    is_manual: Optional[bool] = None
    is_cached: Optional[bool] = None

class Schedule(ScheduleBase, RecordRead):
    is_cached: bool
