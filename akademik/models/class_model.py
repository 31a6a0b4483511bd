# akademik/models/class_model.py
from sqlalchemy import Column, String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin


class ClassModel(RecordMixin, Base):
    __tablename__ = "classes"

    # Foreign Keys
    academic_year_id = Column(Integer, ForeignKey("academic_years.id"), nullable=False, index=True)

    # Class Information
    grade_level = Column(Integer, nullable=False)
    rombel = Column(String(10), nullable=False)
    class_name = Column(String(50), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint('grade_level BETWEEN 7 AND 9', name='ck_class_grade_level'),
    )

    # Relationships
    academic_year = relationship("AcademicYear", back_populates="classes")
    jtm_assignments = relationship("JtmAssignment", back_populates="class_ref")
