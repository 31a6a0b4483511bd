import pytest

from akademik.core.exceptions import NotFoundError
from akademik.schemas.workload_schemas import WorkloadStatus
from akademik.services.workload_service import (
    MAX_WORKLOAD_HOURS, MIN_WORKLOAD_HOURS, WorkloadService, classify_workload,
)


@pytest.mark.parametrize("total,expected", [
    (0, WorkloadStatus.KURANG),
    (23.99, WorkloadStatus.KURANG),
    (24, WorkloadStatus.LAYAK),
    (32.5, WorkloadStatus.LAYAK),
    (40, WorkloadStatus.LAYAK),
    (40.01, WorkloadStatus.LEBIH),
    (45, WorkloadStatus.LEBIH),
])
def test_classify_workload(total, expected):
    assert classify_workload(total) == expected


def test_thresholds():
    assert MIN_WORKLOAD_HOURS == 24
    assert MAX_WORKLOAD_HOURS == 40


async def test_teacher_workload_combines_jtm_and_tasks(db, factory):
    year = await factory.academic_year()
    teacher = await factory.teacher()
    subject = await factory.subject()
    class_7a = await factory.class_(year)
    task = await factory.task(jp_equivalent="4")
    await factory.jtm(year, teacher, subject, class_7a, 20)
    await factory.task_assignment(year, teacher, task)

    workload = await WorkloadService(db).calculate_teacher_workload(teacher.id, year.id)

    assert workload.total_jtm_hours == 20
    assert workload.total_task_equivalent == 4.0
    assert workload.total_workload == 24.0
    assert workload.status == WorkloadStatus.LAYAK
    assert len(workload.details) == 2
    assert workload.details[0].type == "jtm"
    assert workload.details[0].subject_name == "Matematika"
    assert workload.details[0].class_name == "7A"
    assert workload.details[0].hours == 20
    assert workload.details[1].type == "task"
    assert workload.details[1].task_name == "Wali Kelas"
    assert workload.details[1].hours == 4.0


async def test_fractional_task_equivalents_are_summed_exactly(db, factory):
    year = await factory.academic_year()
    teacher = await factory.teacher()
    first = await factory.task(name="Pembina OSIS", jp_equivalent="0.1")
    second = await factory.task(name="Piket", jp_equivalent="0.2")
    await factory.task_assignment(year, teacher, first)
    await factory.task_assignment(year, teacher, second)

    workload = await WorkloadService(db).calculate_teacher_workload(teacher.id, year.id)

    assert workload.total_task_equivalent == 0.3
    assert workload.status == WorkloadStatus.KURANG


async def test_teacher_workload_unknown_teacher(db, factory):
    year = await factory.academic_year()
    with pytest.raises(NotFoundError) as exc_info:
        await WorkloadService(db).calculate_teacher_workload(999, year.id)
    assert exc_info.value.detail == "Teacher with id 999 not found"


async def test_teacher_workload_unknown_year_sums_to_zero(db, factory):
    teacher = await factory.teacher()

    workload = await WorkloadService(db).calculate_teacher_workload(teacher.id, 999)

    assert workload.total_workload == 0
    assert workload.details == []
    assert workload.status == WorkloadStatus.KURANG


async def test_all_workloads_lists_jtm_teachers_then_task_only_teachers(db, factory):
    year = await factory.academic_year()
    subject = await factory.subject()
    class_7a = await factory.class_(year)
    task = await factory.task()
    jtm_teacher = await factory.teacher(name="Ani", nip_nuptk="1")
    task_teacher = await factory.teacher(name="Citra", nip_nuptk="2")
    await factory.task_assignment(year, task_teacher, task)
    await factory.jtm(year, jtm_teacher, subject, class_7a, 24)
    await factory.task_assignment(year, jtm_teacher, task)

    workloads = await WorkloadService(db).get_all_teacher_workloads(year.id)

    assert [w.teacher_name for w in workloads] == ["Ani", "Citra"]


async def test_teachers_by_status(db, factory):
    year = await factory.academic_year()
    subject = await factory.subject()
    class_7a = await factory.class_(year)
    class_7b = await factory.class_(year, rombel="B")
    light = await factory.teacher(name="Dewi", nip_nuptk="1")
    heavy = await factory.teacher(name="Eko", nip_nuptk="2")
    await factory.jtm(year, light, subject, class_7a, 10)
    await factory.jtm(year, heavy, subject, class_7b, 45)

    service = WorkloadService(db)
    kurang = await service.get_teachers_by_status(year.id, WorkloadStatus.KURANG)
    lebih = await service.get_teachers_by_status(year.id, WorkloadStatus.LEBIH)
    layak = await service.get_teachers_by_status(year.id, WorkloadStatus.LAYAK)

    assert [w.teacher_id for w in kurang] == [light.id]
    assert [w.teacher_id for w in lebih] == [heavy.id]
    assert layak == []


async def test_summary_empty_year(db, factory):
    year = await factory.academic_year()

    summary = await WorkloadService(db).get_workload_summary(year.id)

    assert summary.total_teachers == 0
    assert summary.layak_count == 0
    assert summary.average_workload == 0


async def test_summary_counts_and_average(db, factory):
    year = await factory.academic_year()
    subject = await factory.subject()
    class_7a = await factory.class_(year)
    class_7b = await factory.class_(year, rombel="B")
    first = await factory.teacher(name="Fajar", nip_nuptk="1")
    second = await factory.teacher(name="Gita", nip_nuptk="2")
    await factory.jtm(year, first, subject, class_7a, 24)
    await factory.jtm(year, second, subject, class_7b, 10)

    summary = await WorkloadService(db).get_workload_summary(year.id)

    assert summary.total_teachers == 2
    assert summary.layak_count == 1
    assert summary.kurang_count == 1
    assert summary.lebih_count == 0
    assert summary.average_workload == 17.0


async def test_workload_details(db, factory):
    year = await factory.academic_year()
    teacher = await factory.teacher()
    subject = await factory.subject()
    class_7a = await factory.class_(year)
    task = await factory.task(jp_equivalent="2.5")
    await factory.jtm(year, teacher, subject, class_7a, 18)
    await factory.task_assignment(year, teacher, task, description="Kelas 7A")

    details = await WorkloadService(db).get_teacher_workload_details(teacher.id, year.id)

    assert details.teacher.nip_nuptk == teacher.nip_nuptk
    assert details.jtm_assignments[0].allocated_hours == 18
    assert details.task_assignments[0].jp_equivalent == 2.5
    assert details.task_assignments[0].description == "Kelas 7A"
    assert details.summary.total_workload == 20.5
    assert details.summary.minimum_required == 24
    assert details.summary.surplus_deficit == -3.5
    assert details.summary.status == WorkloadStatus.KURANG


async def test_workload_details_unknown_teacher(db):
    with pytest.raises(NotFoundError):
        await WorkloadService(db).get_teacher_workload_details(42, 1)
