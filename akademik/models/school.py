# akademik/models/school.py
"""School master data (letterhead owner for SK documents)."""
from sqlalchemy import Column, String, Text
from .base import Base, RecordMixin

class School(RecordMixin, Base):
    __tablename__ = "schools"

    name = Column(Text, nullable=False)
    npsn = Column(String(20), nullable=False, index=True)  # national school number
    address = Column(Text, nullable=False)
    principal_name = Column(Text, nullable=False)
    principal_nip = Column(String(30), nullable=False)
    logo_url = Column(Text, nullable=True)
    letterhead_url = Column(Text, nullable=True)
