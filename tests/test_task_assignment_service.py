import pytest

from akademik.core.exceptions import NotFoundError
from akademik.schemas.assignment_schemas import TaskAssignmentCreate
from akademik.services.task_assignment_service import TaskAssignmentService


async def test_create_requires_task(db, factory):
    year = await factory.academic_year()
    teacher = await factory.teacher()

    with pytest.raises(NotFoundError) as exc_info:
        await TaskAssignmentService(db).create_assignment(
            TaskAssignmentCreate(academic_year_id=year.id, teacher_id=teacher.id, task_id=999)
        )

    assert exc_info.value.detail == "Additional task with id 999 not found"


async def test_allocation_chart(db, factory):
    year = await factory.academic_year()
    first = await factory.teacher(name="Indra", nip_nuptk="1")
    second = await factory.teacher(name="Joko", nip_nuptk="2")
    homeroom = await factory.task(name="Wali Kelas", jp_equivalent="2")
    library = await factory.task(name="Kepala Perpustakaan", jp_equivalent="12")
    await factory.task_assignment(year, first, homeroom, description="7A")
    await factory.task_assignment(year, second, homeroom, description="7B")
    await factory.task_assignment(year, second, library)

    chart = await TaskAssignmentService(db).get_allocation_chart_data(year.id)

    assert [item.task_name for item in chart] == ["Wali Kelas", "Kepala Perpustakaan"]
    assert chart[0].assigned_count == 2
    assert chart[0].task_equivalent == 2.0
    assert chart[0].total_equivalent == 4.0
    assert [t.description for t in chart[0].teachers] == ["7A", "7B"]
    assert chart[1].total_equivalent == 12.0


async def test_update_unknown_assignment(db):
    with pytest.raises(NotFoundError) as exc_info:
        await TaskAssignmentService(db).update_assignment(999, {"description": "x"})
    assert exc_info.value.detail == "Task assignment with id 999 not found"
