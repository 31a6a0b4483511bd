# akademik/models/teacher.py
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin

class Teacher(RecordMixin, Base):
    __tablename__ = "teachers"

    name = Column(Text, nullable=False)
    nip_nuptk = Column(String(30), nullable=False, index=True)
    tmt = Column(DateTime, nullable=False)  # start of service
    education = Column(Text, nullable=False)

    # Relationships
    jtm_assignments = relationship("JtmAssignment", back_populates="teacher")
    task_assignments = relationship("TaskAssignment", back_populates="teacher")
