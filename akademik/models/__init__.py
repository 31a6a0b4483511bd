# akademik/models/__init__.py
"""Import all models here so Base.metadata is complete for Alembic and tests."""
from .base import Base

from .school import School
from .teacher import Teacher
from .academic_year import AcademicYear
from .class_model import ClassModel
from .subject import Subject
from .additional_task import AdditionalTask
from .jtm_assignment import JtmAssignment
from .task_assignment import TaskAssignment
from .sk_document import SkDocumentTemplate, SkDocument
from .schedule import ScheduleTemplate, TimeSlot, Schedule

__all__ = [
    "Base",
    "School",
    "Teacher",
    "AcademicYear",
    "ClassModel",
    "Subject",
    "AdditionalTask",
    "JtmAssignment",
    "TaskAssignment",
    "SkDocumentTemplate",
    "SkDocument",
    "ScheduleTemplate",
    "TimeSlot",
    "Schedule",
]
