from akademik.schemas.report_schemas import ReportFormat
from akademik.services.report_service import ReportService


async def _seed(factory):
    year = await factory.academic_year()
    teacher = await factory.teacher(name="Kartika", nip_nuptk="1")
    math = await factory.subject(code="MTK", name="Matematika", time_allocation=5)
    science = await factory.subject(code="IPA", name="IPA", time_allocation=4)
    class_7a = await factory.class_(year)
    task = await factory.task(name="Wali Kelas", jp_equivalent="2")
    await factory.jtm(year, teacher, math, class_7a, 3)
    await factory.jtm(year, teacher, math, class_7a, 2)
    await factory.jtm(year, teacher, science, class_7a, 6)
    await factory.task_assignment(year, teacher, task, description="7A")
    return year, teacher, class_7a


async def test_reports_for_unknown_year(db):
    service = ReportService(db)
    for result in (
        await service.generate_workload_report(999),
        await service.generate_jtm_allocation_report(999),
        await service.generate_task_allocation_report(999),
    ):
        assert result.success is False
        assert result.error == "Academic year not found"
        assert result.report_url is None


async def test_workload_report(db, factory):
    year, teacher, _ = await _seed(factory)

    result = await ReportService(db).generate_workload_report(year.id, ReportFormat.EXCEL)

    assert result.success is True
    assert result.report_url == f"/reports/workload-{year.id}.excel"
    row = result.data["workload_summary"][0]
    assert row["teacher_name"] == "Kartika"
    assert row["total_workload"] == 13.0
    assert row["status"] == "kurang"
    assert len(row["jtm_details"]) == 3
    assert row["task_details"][0]["task_name"] == "Wali Kelas"


async def test_jtm_allocation_report_groups_by_class_and_subject(db, factory):
    year, _, _ = await _seed(factory)

    result = await ReportService(db).generate_jtm_allocation_report(year.id)

    assert result.report_url == f"/reports/jtm-allocation-{year.id}.pdf"
    assert result.data["total_assignments"] == 3
    summary = {row["subject_name"]: row for row in result.data["allocation_summary"]}
    assert summary["Matematika"]["total_allocated"] == 5
    assert summary["Matematika"]["allocation_status"] == "complete"
    assert summary["Matematika"]["difference"] == 0
    assert summary["IPA"]["allocation_status"] == "over"
    assert summary["IPA"]["difference"] == 2


async def test_task_allocation_report(db, factory):
    year, _, _ = await _seed(factory)

    result = await ReportService(db).generate_task_allocation_report(year.id)

    assert result.data["total_assignments"] == 1
    assert result.data["task_assignments"][0]["description"] == "7A"
    assert result.data["task_summary"][0]["total_jp"] == 2.0
    assert result.data["task_summary"][0]["assigned_count"] == 1


async def test_report_filters(db, factory):
    year, teacher, class_7a = await _seed(factory)
    await factory.teacher(name="Unassigned", nip_nuptk="9")

    filters = await ReportService(db).get_report_filters(year.id)

    assert [c.id for c in filters.classes] == [class_7a.id]
    assert [t.id for t in filters.teachers] == [teacher.id]
    assert sorted(s.code for s in filters.subjects) == ["IPA", "MTK"]
