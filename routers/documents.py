# routers/documents.py
from typing import List
from fastapi import APIRouter, Depends, status

from dependencies import get_document_service
from schemas.document import DocumentPayload, DocumentResponse
from services import DocumentService

router = APIRouter(prefix="/api/documents", tags=["documents"])


@router.post(
     "",
     response_model=DocumentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a document"
)
def create_document(payload: DocumentPayload, service: DocumentService = Depends(get_document_service)):
     """
     Store a document for an existing property.

     **metadata.title** is required but metadata is not stored.
     """
     return service.create(payload)


@router.get("", response_model=List[DocumentResponse], summary="List all documents")
def get_all_documents(service: DocumentService = Depends(get_document_service)):
     return service.get_all()


@router.get("/{document_id}", response_model=DocumentResponse, summary="Get a document")
def get_document_by_id(document_id: str, service: DocumentService = Depends(get_document_service)):
     return service.get_by_id(document_id)


@router.put("/{document_id}", response_model=DocumentResponse, summary="Update a document")
def update_document(
     document_id: str,
     payload: DocumentPayload,
     service: DocumentService = Depends(get_document_service),
):
     return service.update(document_id, payload)


@router.delete("/{document_id}", response_model=None, summary="Delete a document")
def delete_document(document_id: str, service: DocumentService = Depends(get_document_service)):
     service.delete(document_id)
     return None
