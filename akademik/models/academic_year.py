# akademik/models/academic_year.py
from sqlalchemy import Column, String, Integer, Boolean, Text, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin

class AcademicYear(RecordMixin, Base):
    __tablename__ = "academic_years"

    year = Column(String(9), nullable=False)  # e.g. "2024/2025"
    semester = Column(Integer, nullable=False)
    curriculum = Column(Text, nullable=False)
    total_time_allocation = Column(Integer, nullable=False)
    is_active = Column(Boolean, default=False, nullable=False, index=True)

    __table_args__ = (
        CheckConstraint('semester IN (1, 2)', name='ck_academic_year_semester'),
        CheckConstraint('total_time_allocation > 0', name='ck_academic_year_allocation_positive'),
    )

    # Relationships
    classes = relationship("ClassModel", back_populates="academic_year")
    jtm_assignments = relationship("JtmAssignment", back_populates="academic_year")
    task_assignments = relationship("TaskAssignment", back_populates="academic_year")
