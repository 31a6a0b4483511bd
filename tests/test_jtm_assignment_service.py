import pytest

from akademik.core.exceptions import NotFoundError
from akademik.schemas.assignment_schemas import JtmAssignmentCreate
from akademik.services.jtm_assignment_service import JtmAssignmentService


async def _setup(factory, total_time_allocation=38):
    year = await factory.academic_year(total_time_allocation=total_time_allocation)
    teacher = await factory.teacher()
    subject = await factory.subject()
    class_7a = await factory.class_(year)
    return year, teacher, subject, class_7a


def _request(year, teacher, subject, class_obj, hours):
    return JtmAssignmentCreate(
        academic_year_id=year.id,
        teacher_id=teacher.id,
        subject_id=subject.id,
        class_id=class_obj.id,
        allocated_hours=hours,
    )


async def test_validate_exceeding_limit(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    other_subject = await factory.subject(code="IPA", name="IPA")
    await factory.jtm(year, teacher, other_subject, class_7a, 30)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 20))

    assert result.is_valid is False
    assert result.errors == ["Total allocation (50 hours) exceeds curriculum limit (38 hours) for this class"]
    assert result.warnings == []


async def test_validate_approaching_limit(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    other_subject = await factory.subject(code="IPA", name="IPA")
    await factory.jtm(year, teacher, other_subject, class_7a, 30)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 5))

    assert result.is_valid is True
    assert result.errors == []
    assert result.warnings == ["Total allocation (35 hours) is approaching curriculum limit (38 hours)"]


async def test_validate_exactly_at_limit_warns(db, factory):
    year, teacher, subject, class_7a = await _setup(factory, total_time_allocation=10)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 10))

    assert result.is_valid is True
    assert len(result.warnings) == 1


async def test_validate_at_ninety_percent_is_clean(db, factory):
    year, teacher, subject, class_7a = await _setup(factory, total_time_allocation=10)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 9))

    assert result.is_valid is True
    assert result.warnings == []


async def test_validate_only_counts_the_target_class(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    class_7b = await factory.class_(year, rombel="B")
    await factory.jtm(year, teacher, subject, class_7b, 36)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 4))

    assert result.is_valid is True
    assert result.warnings == []


async def test_validate_duplicate(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    await factory.jtm(year, teacher, subject, class_7a, 4)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 4))

    assert result.is_valid is False
    assert result.errors == ["This teacher is already assigned to teach this subject in this class"]


async def test_validate_unknown_year(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    request = _request(year, teacher, subject, class_7a, 4).model_copy(update={"academic_year_id": 999})

    result = await JtmAssignmentService(db).validate_allocation(request)

    assert result.is_valid is False
    assert result.errors == ["Academic year with id 999 not found"]


async def test_validate_store_failure(db, factory, monkeypatch):
    year, teacher, subject, class_7a = await _setup(factory)
    service = JtmAssignmentService(db)

    async def broken(*args, **kwargs):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(service, "_class_total", broken)

    result = await service.validate_allocation(_request(year, teacher, subject, class_7a, 4))

    assert result.is_valid is False
    assert result.errors == ["Validation failed due to system error"]
    assert result.warnings == []


async def test_validate_does_not_write(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    service = JtmAssignmentService(db)

    await service.validate_allocation(_request(year, teacher, subject, class_7a, 4))

    assert await service.get_by_academic_year(year.id) == []


async def test_create_assignment_skips_limit_checks(db, factory):
    year, teacher, subject, class_7a = await _setup(factory, total_time_allocation=10)
    service = JtmAssignmentService(db)

    first = await service.create_assignment(_request(year, teacher, subject, class_7a, 8))
    second = await service.create_assignment(_request(year, teacher, subject, class_7a, 8))

    assert first.id != second.id
    assert len(await service.get_by_class(class_7a.id, year.id)) == 2


@pytest.mark.parametrize("field,label", [
    ("academic_year_id", "Academic year"),
    ("teacher_id", "Teacher"),
    ("subject_id", "Subject"),
    ("class_id", "Class"),
])
async def test_create_assignment_missing_reference(db, factory, field, label):
    year, teacher, subject, class_7a = await _setup(factory)
    request = _request(year, teacher, subject, class_7a, 4).model_copy(update={field: 999})

    with pytest.raises(NotFoundError) as exc_info:
        await JtmAssignmentService(db).create_assignment(request)

    assert exc_info.value.detail == f"{label} with id 999 not found"


async def test_update_assignment(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    assignment = await factory.jtm(year, teacher, subject, class_7a, 4)
    service = JtmAssignmentService(db)

    updated = await service.update_assignment(assignment.id, {"allocated_hours": 6})
    assert updated.allocated_hours == 6

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_assignment(assignment.id, {"subject_id": 999})
    assert exc_info.value.detail == "Subject with id 999 not found"

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_assignment(999, {"allocated_hours": 6})
    assert exc_info.value.detail == "JTM assignment with id 999 not found"


async def test_lists_by_teacher_and_class(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    other_teacher = await factory.teacher(name="Hana", nip_nuptk="2")
    class_7b = await factory.class_(year, rombel="B")
    await factory.jtm(year, teacher, subject, class_7a, 4)
    await factory.jtm(year, other_teacher, subject, class_7b, 4)
    service = JtmAssignmentService(db)

    assert [a.class_id for a in await service.get_by_teacher(teacher.id, year.id)] == [class_7a.id]
    assert [a.teacher_id for a in await service.get_by_class(class_7b.id, year.id)] == [other_teacher.id]


async def test_progress(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    class_7b = await factory.class_(year, rombel="B")
    await factory.jtm(year, teacher, subject, class_7a, 4)

    progress = await JtmAssignmentService(db).get_allocation_progress(year.id)

    assert [p.class_id for p in progress] == [class_7a.id, class_7b.id]
    assert progress[0].total_allocated == 4
    assert progress[0].curriculum_limit == 38
    assert progress[0].progress_percentage == 10.53
    assert progress[0].subjects[0].subject_name == "Matematika"
    assert progress[0].subjects[0].curriculum_hours == 5
    assert progress[1].total_allocated == 0
    assert progress[1].progress_percentage == 0
    assert progress[1].subjects == []


async def test_progress_unknown_year(db):
    with pytest.raises(NotFoundError) as exc_info:
        await JtmAssignmentService(db).get_allocation_progress(999)
    assert exc_info.value.detail == "Academic year with id 999 not found"


async def test_validate_single_assignment_over_limit(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 50))

    assert result.is_valid is False
    assert len(result.errors) == 1
    assert "exceeds curriculum limit" in result.errors[0]


async def test_validate_reports_ceiling_and_duplicate_together(db, factory):
    year, teacher, subject, class_7a = await _setup(factory)
    await factory.jtm(year, teacher, subject, class_7a, 30)

    result = await JtmAssignmentService(db).validate_allocation(_request(year, teacher, subject, class_7a, 10))

    assert result.is_valid is False
    assert result.errors == [
        "Total allocation (40 hours) exceeds curriculum limit (38 hours) for this class",
        "This teacher is already assigned to teach this subject in this class",
    ]
    assert result.warnings == []
