# akademik/models/subject.py
from sqlalchemy import Column, String, Integer, Text
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin

class Subject(RecordMixin, Base):
    __tablename__ = "subjects"

    code = Column(String(20), nullable=False, index=True)
    name = Column(Text, nullable=False)
    time_allocation = Column(Integer, nullable=False)  # base weekly JP

    jtm_assignments = relationship("JtmAssignment", back_populates="subject")
