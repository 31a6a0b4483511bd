# akademik/models/additional_task.py
from sqlalchemy import Column, Numeric, Text, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin

class AdditionalTask(RecordMixin, Base):
    __tablename__ = "additional_tasks"

    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    jp_equivalent = Column(Numeric(4, 2), nullable=False)

    __table_args__ = (
        CheckConstraint('jp_equivalent > 0', name='ck_task_jp_positive'),
    )

    task_assignments = relationship("TaskAssignment", back_populates="task")
