# akademik/models/task_assignment.py
from sqlalchemy import Column, Integer, ForeignKey, Text
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin

class TaskAssignment(RecordMixin, Base):
    __tablename__ = "task_assignments"

    # Foreign Keys
    academic_year_id = Column(Integer, ForeignKey("academic_years.id"), nullable=False, index=True)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False, index=True)
    task_id = Column(Integer, ForeignKey("additional_tasks.id"), nullable=False, index=True)

    description = Column(Text, nullable=True)

    # Relationships
    academic_year = relationship("AcademicYear", back_populates="task_assignments")
    teacher = relationship("Teacher", back_populates="task_assignments")
    task = relationship("AdditionalTask", back_populates="task_assignments")
