# schemas/document.py
from typing import Optional
from pydantic import Field

from .common import CamelModel, RecordResponse


class DocumentCreate(CamelModel):
     lease_id: str = Field(..., min_length=1)
     file_name: str = Field(..., min_length=1, max_length=255)
     file_url: str = Field(..., min_length=1, max_length=1000)
     document_type: str = Field(..., min_length=1, max_length=100)


class DocumentUpdate(CamelModel):
     lease_id: Optional[str] = Field(None, min_length=1)
     file_name: Optional[str] = Field(None, min_length=1, max_length=255)
     file_url: Optional[str] = Field(None, min_length=1, max_length=1000)
     document_type: Optional[str] = Field(None, min_length=1, max_length=100)


class DocumentResponse(RecordResponse):
     lease_id: str
     file_name: str
     file_url: str
     document_type: str
