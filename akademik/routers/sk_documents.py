# akademik/routers/sk_documents.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..schemas.sk_document_schemas import (
    PdfExportResult, SkDocument, SkDocumentCreate, SkDocumentPreview, SkDocumentTemplate,
    SkDocumentTemplateCreate, SkDocumentTemplateUpdate, SkDocumentUpdate,
)
from ..services.sk_document_service import SkDocumentService, SkDocumentTemplateService

router = APIRouter(prefix="/api/v1/sk-documents", tags=["SK Documents"])

# ---------- Templates ----------

@router.post("/templates", response_model=SkDocumentTemplate, status_code=status.HTTP_201_CREATED)
async def create_template(template: SkDocumentTemplateCreate, db: AsyncSession = Depends(get_db)):
    service = SkDocumentTemplateService(db)
    return await service.create(template.model_dump())

@router.get("/templates", response_model=List[SkDocumentTemplate])
async def get_templates(db: AsyncSession = Depends(get_db)):
    service = SkDocumentTemplateService(db)
    return await service.get_multi()

@router.get("/templates/{template_id}", response_model=SkDocumentTemplate)
async def get_template(template_id: int, db: AsyncSession = Depends(get_db)):
    service = SkDocumentTemplateService(db)
    template = await service.get(template_id)
    if not template:
        raise HTTPException(status_code=404, detail=f"SK document template with id {template_id} not found")
    return template

@router.put("/templates/{template_id}", response_model=SkDocumentTemplate)
async def update_template(template_id: int, template: SkDocumentTemplateUpdate, db: AsyncSession = Depends(get_db)):
    service = SkDocumentTemplateService(db)
    return await service.update_template(template_id, template.model_dump(exclude_unset=True))

@router.delete("/templates/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(template_id: int, db: AsyncSession = Depends(get_db)):
    service = SkDocumentTemplateService(db)
    if not await service.delete(template_id):
        raise HTTPException(status_code=404, detail=f"SK document template with id {template_id} not found")

# ---------- Documents ----------

@router.post("/", response_model=SkDocument, status_code=status.HTTP_201_CREATED)
async def generate_document(document: SkDocumentCreate, db: AsyncSession = Depends(get_db)):
    service = SkDocumentService(db)
    return await service.generate_document(document)

@router.get("/preview", response_model=SkDocumentPreview)
async def preview_document(
    template_id: int = Query(...),
    academic_year_id: int = Query(...),
    db: AsyncSession = Depends(get_db)
):
    """Fill a template without saving the result"""
    service = SkDocumentService(db)
    return await service.preview_document(template_id, academic_year_id)

@router.get("/academic-year/{academic_year_id}", response_model=List[SkDocument])
async def get_documents_by_academic_year(academic_year_id: int, db: AsyncSession = Depends(get_db)):
    service = SkDocumentService(db)
    return await service.get_by_academic_year(academic_year_id)

@router.get("/{document_id}", response_model=SkDocument)
async def get_document(document_id: int, db: AsyncSession = Depends(get_db)):
    service = SkDocumentService(db)
    document = await service.get(document_id)
    if not document:
        raise HTTPException(status_code=404, detail=f"SK document with id {document_id} not found")
    return document

@router.put("/{document_id}", response_model=SkDocument)
async def update_document(document_id: int, document: SkDocumentUpdate, db: AsyncSession = Depends(get_db)):
    service = SkDocumentService(db)
    return await service.update_document(document_id, document.model_dump(exclude_unset=True))

@router.post("/{document_id}/export-pdf", response_model=PdfExportResult)
async def export_document_pdf(document_id: int, db: AsyncSession = Depends(get_db)):
    service = SkDocumentService(db)
    return await service.export_to_pdf(document_id)

@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(document_id: int, db: AsyncSession = Depends(get_db)):
    service = SkDocumentService(db)
    if not await service.delete(document_id):
        raise HTTPException(status_code=404, detail=f"SK document with id {document_id} not found")
