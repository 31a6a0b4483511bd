import pytest

from akademik.core.exceptions import NotFoundError
from akademik.models.schedule import SlotType
from akademik.schemas.schedule_schemas import ScheduleCreate, TimeSlotCreate
from akademik.services.schedule_service import ScheduleService, ScheduleTemplateService, TimeSlotService


def _slot(template_id, day_of_week=1, jp_number=1):
    return TimeSlotCreate(
        template_id=template_id,
        day_of_week=day_of_week,
        jp_number=jp_number,
        start_time="07:00",
        end_time="07:40",
        duration=40,
        slot_type=SlotType.BELAJAR,
    )


async def test_create_time_slot_requires_template(db):
    with pytest.raises(NotFoundError) as exc_info:
        await TimeSlotService(db).create_time_slot(_slot(999))
    assert exc_info.value.detail == "Schedule template with id 999 not found"


async def test_time_slots_by_template_and_day(db, factory):
    template = await factory.schedule_template()
    other = await factory.schedule_template(name="Jadwal Ramadhan")
    service = TimeSlotService(db)
    tuesday = await service.create_time_slot(_slot(template.id, day_of_week=2, jp_number=1))
    monday_second = await service.create_time_slot(_slot(template.id, day_of_week=1, jp_number=2))
    monday_first = await service.create_time_slot(_slot(template.id, day_of_week=1, jp_number=1))
    await service.create_time_slot(_slot(other.id))

    all_slots = await service.get_by_template(template.id)
    monday = await service.get_by_template(template.id, day_of_week=1)

    assert [s.id for s in all_slots] == [monday_first.id, monday_second.id, tuesday.id]
    assert [s.id for s in monday] == [monday_first.id, monday_second.id]
    assert monday[0].slot_type == SlotType.BELAJAR


async def test_update_time_slot(db, factory):
    template = await factory.schedule_template()
    time_slot = await factory.time_slot(template)
    service = TimeSlotService(db)

    updated = await service.update_time_slot(time_slot.id, {"slot_type": SlotType.UPACARA, "jp_number": 3})
    assert updated.slot_type == SlotType.UPACARA
    assert updated.jp_number == 3

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_time_slot(time_slot.id, {"template_id": 999})
    assert exc_info.value.detail == "Schedule template with id 999 not found"

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_time_slot(999, {"jp_number": 2})
    assert exc_info.value.detail == "Time slot with id 999 not found"


async def test_delete_time_slots_by_template(db, factory):
    template = await factory.schedule_template()
    other = await factory.schedule_template(name="Jadwal Ramadhan")
    await factory.time_slot(template, jp_number=1)
    await factory.time_slot(template, jp_number=2)
    kept = await factory.time_slot(other)
    service = TimeSlotService(db)

    assert await service.delete_by_template(template.id) is True
    assert await service.get_by_template(template.id) == []
    assert [s.id for s in await service.get_by_template(other.id)] == [kept.id]
    assert await service.delete_by_template(template.id) is False


async def test_update_schedule_template(db, factory):
    template = await factory.schedule_template()
    service = ScheduleTemplateService(db)

    updated = await service.update_template(template.id, {"name": "Jadwal Baru"})
    assert updated.name == "Jadwal Baru"

    with pytest.raises(NotFoundError):
        await service.update_template(999, {"name": "x"})


async def _schedule_request(factory, **overrides):
    year = await factory.academic_year()
    class_7a = await factory.class_(year)
    template = await factory.schedule_template()
    data = {
        "academic_year_id": year.id,
        "class_id": class_7a.id,
        "template_id": template.id,
        "day_of_week": 1,
        "jp_number": 1,
        "is_manual": True,
        **overrides,
    }
    return ScheduleCreate(**data)


async def test_create_schedule_without_subject_or_teacher(db, factory):
    request = await _schedule_request(factory)

    schedule = await ScheduleService(db).create_schedule(request)

    assert schedule.subject_id is None
    assert schedule.teacher_id is None
    assert schedule.is_manual is True
    assert schedule.is_cached is True


@pytest.mark.parametrize("field,label", [
    ("academic_year_id", "Academic year"),
    ("class_id", "Class"),
    ("template_id", "Schedule template"),
    ("subject_id", "Subject"),
    ("teacher_id", "Teacher"),
])
async def test_create_schedule_missing_reference(db, factory, field, label):
    request = await _schedule_request(factory)
    request = request.model_copy(update={field: 999})

    with pytest.raises(NotFoundError) as exc_info:
        await ScheduleService(db).create_schedule(request)

    assert exc_info.value.detail == f"{label} with id 999 not found"


async def test_schedules_by_class_and_teacher(db, factory):
    teacher = await factory.teacher()
    subject = await factory.subject()
    request = await _schedule_request(factory, teacher_id=teacher.id, subject_id=subject.id)
    service = ScheduleService(db)
    later = await service.create_schedule(request.model_copy(update={"day_of_week": 2}))
    earlier = await service.create_schedule(request)
    unassigned = await service.create_schedule(
        request.model_copy(update={"jp_number": 2, "teacher_id": None, "subject_id": None})
    )

    by_class = await service.get_by_class(request.class_id, request.academic_year_id)
    by_teacher = await service.get_by_teacher(teacher.id, request.academic_year_id)

    assert [s.id for s in by_class] == [earlier.id, unassigned.id, later.id]
    assert [s.id for s in by_teacher] == [earlier.id, later.id]


async def test_update_schedule_clears_teacher(db, factory):
    teacher = await factory.teacher()
    request = await _schedule_request(factory, teacher_id=teacher.id)
    service = ScheduleService(db)
    schedule = await service.create_schedule(request)

    updated = await service.update_schedule(schedule.id, {"teacher_id": None})
    assert updated.teacher_id is None

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_schedule(schedule.id, {"class_id": 999})
    assert exc_info.value.detail == "Class with id 999 not found"

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_schedule(999, {"jp_number": 2})
    assert exc_info.value.detail == "Schedule with id 999 not found"
