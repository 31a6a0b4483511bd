# akademik/services/sk_document_service.py
"""SK (decree) templates and generated documents.

Templates carry ``{{placeholder}}`` markers which are filled from the academic
year and the computed teacher workloads.
"""
from typing import List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import logging

from .base_service import BaseService
from .workload_service import WorkloadService
from ..core.exceptions import NotFoundError
from ..models.academic_year import AcademicYear
from ..models.sk_document import SkDocument, SkDocumentTemplate
from ..schemas.sk_document_schemas import (
    FilledPlaceholder, PdfExportResult, SkDocumentCreate, SkDocumentPreview,
)

logger = logging.getLogger(__name__)


def format_jp(hours: float) -> str:
    """24.0 -> '24', 26.5 -> '26.5'"""
    return f"{hours:g}"


def fill_placeholders(content: str, values: List[FilledPlaceholder]) -> str:
    for item in values:
        content = content.replace(item.placeholder, item.value)
    return content


class SkDocumentTemplateService(BaseService[SkDocumentTemplate]):
    def __init__(self, db: AsyncSession):
        super().__init__(SkDocumentTemplate, db)

    async def update_template(self, id: int, obj_in: dict) -> SkDocumentTemplate:
        template = await self.update(id, obj_in)
        if not template:
            raise NotFoundError("SK document template", id)
        return template


class SkDocumentService(BaseService[SkDocument]):
    def __init__(self, db: AsyncSession):
        super().__init__(SkDocument, db)

    async def _render(self, template_id: int, academic_year_id: int) -> Tuple[SkDocumentTemplate, List[FilledPlaceholder], str]:
        template = await self.db.get(SkDocumentTemplate, template_id)
        if not template:
            raise NotFoundError("SK document template", template_id)
        academic_year = await self.db.get(AcademicYear, academic_year_id)
        if not academic_year:
            raise NotFoundError("Academic year", academic_year_id)

        workloads = await WorkloadService(self.db).get_all_teacher_workloads(academic_year_id)
        workload_summary = "\n".join(
            f"{workload.teacher_name} - Total: {format_jp(workload.total_workload)} JP"
            for workload in workloads
        )

        placeholders = [
            FilledPlaceholder(placeholder="{{academic_year}}", value=academic_year.year),
            FilledPlaceholder(placeholder="{{semester}}", value=str(academic_year.semester)),
            FilledPlaceholder(placeholder="{{curriculum}}", value=academic_year.curriculum),
        ]
        content = fill_placeholders(
            template.template_content,
            placeholders + [FilledPlaceholder(placeholder="{{teacher_workload_summary}}", value=workload_summary)],
        )
        return template, placeholders, content

    async def generate_document(self, obj_in: SkDocumentCreate) -> SkDocument:
        try:
            _, _, content = await self._render(obj_in.template_id, obj_in.academic_year_id)
            document = await self.create({**obj_in.model_dump(), "generated_content": content})
        except Exception as e:
            logger.error(f"SK document generation failed: {e}")
            raise
        logger.info(f"SK document {document.document_number} generated")
        return document

    async def preview_document(self, template_id: int, academic_year_id: int) -> SkDocumentPreview:
        template, placeholders, content = await self._render(template_id, academic_year_id)
        return SkDocumentPreview(
            template_name=template.name,
            preview_content=content,
            placeholders_filled=placeholders,
        )

    async def get_by_academic_year(self, academic_year_id: int) -> List[SkDocument]:
        stmt = select(self.model).where(
            self.model.academic_year_id == academic_year_id
        ).order_by(self.model.id)
        result = await self.db.execute(stmt)
        return result.scalars().all()

    async def update_document(self, id: int, obj_in: dict) -> SkDocument:
        document = await self.update(id, obj_in)
        if not document:
            raise NotFoundError("SK document", id)
        return document

    async def export_to_pdf(self, document_id: int) -> PdfExportResult:
        document = await self.get(document_id)
        if not document:
            return PdfExportResult(success=False, error="Document not found")
        return PdfExportResult(success=True, pdf_url=f"/exports/sk-document-{document_id}.pdf")
