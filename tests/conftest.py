from datetime import datetime
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from akademik.core.database import get_db
from akademik.main import app
from akademik.models import (
    AcademicYear, AdditionalTask, Base, ClassModel, JtmAssignment, ScheduleTemplate, Subject, TaskAssignment,
    Teacher, TimeSlot,
)
from akademik.models.schedule import SlotType

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


class Factory:
    """Inserts rows directly, bypassing the services under test."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _add(self, obj):
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def academic_year(self, year="2024/2025", semester=1, total_time_allocation=38, is_active=False):
        return await self._add(AcademicYear(
            year=year,
            semester=semester,
            curriculum="Kurikulum Merdeka",
            total_time_allocation=total_time_allocation,
            is_active=is_active,
        ))

    async def teacher(self, name="Budi Santoso", nip_nuptk="198501012010011001"):
        return await self._add(Teacher(
            name=name,
            nip_nuptk=nip_nuptk,
            tmt=datetime(2010, 1, 1),
            education="S1 Pendidikan Matematika",
        ))

    async def subject(self, code="MTK", name="Matematika", time_allocation=5):
        return await self._add(Subject(code=code, name=name, time_allocation=time_allocation))

    async def class_(self, academic_year, grade_level=7, rombel="A"):
        return await self._add(ClassModel(
            academic_year_id=academic_year.id,
            grade_level=grade_level,
            rombel=rombel,
            class_name=f"{grade_level}{rombel}",
        ))

    async def task(self, name="Wali Kelas", jp_equivalent="2"):
        return await self._add(AdditionalTask(
            name=name,
            description=f"Tugas tambahan {name}",
            jp_equivalent=Decimal(jp_equivalent),
        ))

    async def jtm(self, academic_year, teacher, subject, class_obj, allocated_hours):
        return await self._add(JtmAssignment(
            academic_year_id=academic_year.id,
            teacher_id=teacher.id,
            subject_id=subject.id,
            class_id=class_obj.id,
            allocated_hours=allocated_hours,
        ))

    async def task_assignment(self, academic_year, teacher, task, description=None):
        return await self._add(TaskAssignment(
            academic_year_id=academic_year.id,
            teacher_id=teacher.id,
            task_id=task.id,
            description=description,
        ))

    async def schedule_template(self, name="Jadwal Reguler"):
        return await self._add(ScheduleTemplate(name=name, description=f"Template {name}"))

    async def time_slot(self, template, day_of_week=1, jp_number=1, slot_type=SlotType.BELAJAR):
        return await self._add(TimeSlot(
            template_id=template.id,
            day_of_week=day_of_week,
            jp_number=jp_number,
            start_time="07:00",
            end_time="07:40",
            duration=40,
            slot_type=slot_type,
        ))


@pytest.fixture
def factory(db):
    return Factory(db)
