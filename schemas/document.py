# schemas/document.py
"""
Pydantic schemas for Document API request/response validation.
"""
from typing import List
from pydantic import BaseModel, Field, ConfigDict


class DocumentMetadata(BaseModel):
     """Checked on creation, never stored."""
     title: str = ""
     tags: List[str] = Field(default_factory=list)


class DocumentPayload(BaseModel):
     """Schema for creating or updating a document."""
     property_id: str = Field("", max_length=36)
     document_type: str = Field("", max_length=100)
     content: str = ""
     metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": "2f1c8a6e-6f8a-4c1e-9b57-0c1f1d0f6b11",
                    "document_type": "inspection_report",
                    "content": "Roof and plumbing inspected, no issues.",
                    "metadata": {"title": "2024 annual inspection", "tags": ["inspection"]}
               }
          }
     )


class DocumentResponse(BaseModel):
     """Schema for document response."""
     id: str
     property_id: str
     document_type: str
     content: str

     model_config = ConfigDict(from_attributes=True)
