"""Document DTOs."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from supplier_api.models.domain.compliance import DocumentType


class DocumentUploadResponse(BaseModel):
    """Result of a document upload."""

    supplier_id: UUID
    document_type: DocumentType
    file_name: str
    file_size: int
    uploaded_at: datetime
    replaced: bool
