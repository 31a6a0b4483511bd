# akademik/schemas/sk_document_schemas.py
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from .master_schemas import PartialUpdate, RecordRead


class SkDocumentTemplateBase(BaseModel):
    name: str = Field(..., min_length=1)
    template_content: str

class SkDocumentTemplateCreate(SkDocumentTemplateBase):
    pass

class SkDocumentTemplateUpdate(PartialUpdate):
    name: Optional[str] = Field(default=None, min_length=1)
    template_content: Optional[str] = None

class SkDocumentTemplate(SkDocumentTemplateBase, RecordRead):
    pass


class SkDocumentCreate(BaseModel):
    template_id: int
    academic_year_id: int
    document_number: str = Field(..., min_length=1, max_length=100)
    creation_date: datetime

class SkDocumentUpdate(PartialUpdate):
    document_number: Optional[str] = Field(default=None, min_length=1, max_length=100)
    creation_date: Optional[datetime] = None

class SkDocument(RecordRead):
    template_id: int
    academic_year_id: int
    document_number: str
    creation_date: datetime
    generated_content: str


class FilledPlaceholder(BaseModel):
    placeholder: str
    value: str

class SkDocumentPreview(BaseModel):
    template_name: str
    preview_content: str
    placeholders_filled: List[FilledPlaceholder] = []


class PdfExportResult(BaseModel):
    success: bool
    pdf_url: Optional[str] = None
    error: Optional[str] = None
