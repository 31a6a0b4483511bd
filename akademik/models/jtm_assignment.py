# akademik/models/jtm_assignment.py
# No unique constraint on (teacher, subject, class, year): duplicates are reported by validation.
from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin

class JtmAssignment(RecordMixin, Base):
    __tablename__ = "jtm_assignments"

    # Foreign Keys
    academic_year_id = Column(Integer, ForeignKey("academic_years.id"), nullable=False, index=True)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)

    allocated_hours = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint('allocated_hours > 0', name='ck_jtm_hours_positive'),
    )

    # Relationships
    academic_year = relationship("AcademicYear", back_populates="jtm_assignments")
    teacher = relationship("Teacher", back_populates="jtm_assignments")
    subject = relationship("Subject", back_populates="jtm_assignments")
    class_ref = relationship("ClassModel", back_populates="jtm_assignments")
