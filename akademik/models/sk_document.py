# akademik/models/sk_document.py
"""SK (decree) templates and the documents generated from them."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, RecordMixin

class SkDocumentTemplate(RecordMixin, Base):
    __tablename__ = "sk_document_templates"

    name = Column(Text, nullable=False)
    template_content = Column(Text, nullable=False)

    documents = relationship("SkDocument", back_populates="template")


class SkDocument(RecordMixin, Base):
    __tablename__ = "sk_documents"

    template_id = Column(Integer, ForeignKey("sk_document_templates.id"), nullable=False, index=True)
    academic_year_id = Column(Integer, ForeignKey("academic_years.id"), nullable=False, index=True)
    document_number = Column(String(100), nullable=False)
    creation_date = Column(DateTime, nullable=False)
    generated_content = Column(Text, nullable=False)

    template = relationship("SkDocumentTemplate", back_populates="documents")
