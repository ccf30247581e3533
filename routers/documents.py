# routers/documents.py
"""
Lease document API routes.

Documents are metadata rows pointing at a file URL. Files uploaded through
/upload are stored in Azure Blob Storage first.
"""
import logging
from typing import List

from azure.core.exceptions import AzureError
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

import config
from azure_blob import delete_from_blob, is_blob_url, upload_to_blob
from database import get_session
from dependencies import verify_token
from schemas.document import DocumentCreate, DocumentUpdate, DocumentResponse
from services.repository import documents

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"], dependencies=[Depends(verify_token)])


def _discard_blob(file_url: str) -> None:
     """Best-effort blob removal; the row change has already been decided."""
     try:
          delete_from_blob(file_url)
     except (AzureError, RuntimeError) as e:
          logger.warning("Could not delete blob %s: %s", file_url, e)


@router.get("", response_model=List[DocumentResponse], summary="List documents")
def list_documents(db: Session = Depends(get_session)):
     return documents.list(db)


@router.get("/{document_id}", response_model=DocumentResponse, summary="Get document by ID")
def get_document(document_id: str, db: Session = Depends(get_session)):
     return documents.require(db, document_id)


@router.post(
     "",
     response_model=DocumentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a document by URL"
)
def create_document(document_data: DocumentCreate, db: Session = Depends(get_session)):
     return documents.create(db, document_data)


@router.post(
     "/upload",
     response_model=DocumentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Upload a lease document"
)
def upload_document(
     leaseId: str = Form(...),
     documentType: str = Form(...),
     file: UploadFile = File(...),
     db: Session = Depends(get_session),
):
     """
     Upload the file to blob storage, then register it on the lease.
     The whole row is validated before anything is uploaded, and the blob is
     removed again if the row cannot be stored.
     """
     fields = {
          "leaseId": leaseId,
          "fileName": file.filename,
          "fileUrl": "pending-upload",
          "documentType": documentType,
     }
     documents.validate_new(db, fields)

     file_url = upload_to_blob(file, config.AZURE_DOCUMENTS_CONTAINER, prefix=leaseId)
     try:
          return documents.create(db, dict(fields, fileUrl=file_url))
     except Exception:
          _discard_blob(file_url)
          raise


@router.put("/{document_id}", response_model=DocumentResponse, summary="Update document")
def update_document(document_id: str, document_data: DocumentUpdate, db: Session = Depends(get_session)):
     return documents.update(db, document_id, document_data)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete document")
def delete_document(document_id: str, db: Session = Depends(get_session)):
     """Removes the row; files in our storage account are deleted too."""
     document = documents.require(db, document_id)
     file_url = document.file_url
     documents.delete(db, document_id)
     if is_blob_url(file_url):
          _discard_blob(file_url)
     return None
