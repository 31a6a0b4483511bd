"""Schedule templates, their weekly time slots and per-class schedule entries."""
from sqlalchemy import Column, String, Integer, Boolean, Text, ForeignKey, CheckConstraint, Enum
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin
import enum

class SlotType(str, enum.Enum):
    BELAJAR = "belajar"
    SHOLAT_DHUHA = "sholat_dhuha"
    ISTIRAHAT = "istirahat"
    SHALAT_DZUHUR_BERJAMAAH = "shalat_dzuhur_berjamaah"
    HALAQOH_QURAN = "halaqoh_quran"
    PROGRAM_PEMBIASAAN = "program_pembiasaan"
    UPACARA = "upacara"


class ScheduleTemplate(RecordMixin, Base):
    __tablename__ = "schedule_templates"

    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)

    time_slots = relationship("TimeSlot", back_populates="template")
    schedules = relationship("Schedule", back_populates="template")


class TimeSlot(RecordMixin, Base):
    __tablename__ = "time_slots"

    template_id = Column(Integer, ForeignKey("schedule_templates.id"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)  # 1 = Monday .. 5 = Friday
    jp_number = Column(Integer, nullable=False)
    start_time = Column(String(5), nullable=False)  # HH:mm
    end_time = Column(String(5), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    slot_type = Column(
        Enum(SlotType, name="slot_type", values_callable=lambda members: [m.value for m in members]),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint('day_of_week BETWEEN 1 AND 5', name='ck_time_slot_day'),
        CheckConstraint('jp_number > 0', name='ck_time_slot_jp_positive'),
        CheckConstraint('duration > 0', name='ck_time_slot_duration_positive'),
    )

    template = relationship("ScheduleTemplate", back_populates="time_slots")


class Schedule(RecordMixin, Base):
    __tablename__ = "schedules"

    # Foreign Keys
    academic_year_id = Column(Integer, ForeignKey("academic_years.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    template_id = Column(Integer, ForeignKey("schedule_templates.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=True, index=True)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=True, index=True)

    day_of_week = Column(Integer, nullable=False)
    jp_number = Column(Integer, nullable=False)
    is_manual = Column(Boolean, default=True, nullable=False)
    is_cached = Column(Boolean, default=True, nullable=False)

    __table_args__ = (
        CheckConstraint('day_of_week BETWEEN 1 AND 5', name='ck_schedule_day'),
        CheckConstraint('jp_number > 0', name='ck_schedule_jp_positive'),
    )

    # Relationships
    template = relationship("ScheduleTemplate", back_populates="schedules")
    academic_year = relationship("AcademicYear")
    class_ref = relationship("ClassModel")
    subject = relationship("Subject")
    teacher = relationship("Teacher")
