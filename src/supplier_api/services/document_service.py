"""Compliance document service.

Each supplier holds at most one document per type. Uploading a type that is
already present replaces it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.constants.files import ACCEPTED_PDF_MIME_TYPES
from supplier_api.exceptions import (
    DocumentNotFoundError,
    InvalidDocumentTypeError,
    InvalidUploadError,
    StoredFileMissingError,
    SupplierNotFoundError,
)
from supplier_api.models.domain.compliance import DocumentType
from supplier_api.models.dto.document import DocumentUploadResponse
from supplier_api.repositories.document_repository import DocumentRepository
from supplier_api.repositories.supplier_repository import SupplierRepository
from supplier_api.services.blob_storage import BlobStorage
from supplier_api.utils.validation import sanitize_filename

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    """Blob content with the name it was uploaded under."""

    file_name: str
    content: bytes


def parse_document_type(value: str) -> DocumentType:
    """Parse a document type, rejecting values outside the fixed set.

    Raises:
        InvalidDocumentTypeError: If the value is not a known type
    """
    try:
        return DocumentType(value)
    except ValueError:
        raise InvalidDocumentTypeError(value) from None


def validate_pdf_upload(content: bytes, content_type: str | None, max_size: int) -> None:
    """Check an upload is a non-empty PDF within the size limit.

    Raises:
        InvalidUploadError: If any check fails
    """
    if content_type and content_type.split(";")[0].strip().lower() not in ACCEPTED_PDF_MIME_TYPES:
        raise InvalidUploadError("Invalid file type. Only PDF files are allowed")
    if not content:
        raise InvalidUploadError("No file provided")
    if len(content) > max_size:
        raise InvalidUploadError(f"File too large. Maximum size: {max_size // 1024 // 1024}MB")
    if not BlobStorage.is_pdf(content):
        raise InvalidUploadError("Invalid file type. File content is not a PDF")


class DocumentService:
    """Service for compliance document operations."""

    def __init__(self, session: AsyncSession, storage: BlobStorage) -> None:
        """Initialize service with database session and blob storage."""
        self.session = session
        self.storage = storage
        self.document_repo = DocumentRepository(session)
        self.supplier_repo = SupplierRepository(session)

    async def upload_document(
        self,
        supplier_id: UUID,
        document_type: str,
        filename: str | None,
        content: bytes,
        content_type: str | None,
        max_size: int,
    ) -> DocumentUploadResponse:
        """Upload or replace a supplier's compliance document.

        The new blob is written first. Only then is the previous blob of the
        same type removed (best effort) and its row replaced, so a failed
        write leaves the existing document untouched.

        Args:
            supplier_id: Supplier UUID
            document_type: One of the required document types
            filename: Original filename
            content: File content bytes
            content_type: Declared MIME type
            max_size: Maximum accepted size in bytes

        Returns:
            DocumentUploadResponse

        Raises:
            SupplierNotFoundError: If the supplier does not exist
            InvalidDocumentTypeError: If the type is unknown
            InvalidUploadError: If the file is not an acceptable PDF
        """
        supplier = await self.supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(str(supplier_id))

        doc_type = parse_document_type(document_type)
        validate_pdf_upload(content, content_type, max_size)
        file_name = sanitize_filename(filename)

        storage_key = self.storage.document_key(supplier.id, supplier.name, doc_type.value)
        self.storage.put(storage_key, content)

        previous = await self.document_repo.get_by_supplier_and_type(supplier_id, doc_type.value)
        replaced = previous is not None
        if previous is not None:
            # Same-millisecond re-upload overwrote the blob in place
            if previous.storage_key != storage_key:
                self.storage.delete_quietly(previous.storage_key)
            await self.document_repo.delete(previous)

        uploaded_at = datetime.now(timezone.utc)
        await self.document_repo.create(
            supplier_id=supplier_id,
            document_type=doc_type.value,
            file_name=file_name,
            storage_key=storage_key,
            file_size=len(content),
            uploaded_at=uploaded_at,
        )
        await self.supplier_repo.touch(supplier)
        await self.session.commit()
        logger.info("Stored %s document for supplier %s", doc_type.value, supplier_id)

        return DocumentUploadResponse(
            supplier_id=supplier_id,
            document_type=doc_type,
            file_name=file_name,
            file_size=len(content),
            uploaded_at=uploaded_at,
            replaced=replaced,
        )

    async def get_document_file(self, supplier_id: UUID, document_type: str) -> StoredFile:
        """Fetch a stored compliance document.

        Raises:
            InvalidDocumentTypeError: If the type is unknown
            DocumentNotFoundError: If no document of that type exists
            StoredFileMissingError: If the row exists but the blob is gone
        """
        doc_type = parse_document_type(document_type)
        document = await self.document_repo.get_by_supplier_and_type(supplier_id, doc_type.value)
        if document is None:
            raise DocumentNotFoundError(doc_type.value)

        content = self.storage.get(document.storage_key)
        if content is None:
            raise StoredFileMissingError(document.storage_key)
        return StoredFile(file_name=document.file_name, content=content)

    async def delete_document(self, supplier_id: UUID, document_type: str) -> None:
        """Delete a compliance document, blob first (best effort), then its row.

        Raises:
            InvalidDocumentTypeError: If the type is unknown
            DocumentNotFoundError: If no document of that type exists
        """
        doc_type = parse_document_type(document_type)
        document = await self.document_repo.get_by_supplier_and_type(supplier_id, doc_type.value)
        if document is None:
            raise DocumentNotFoundError(doc_type.value)

        self.storage.delete_quietly(document.storage_key)
        await self.document_repo.delete(document)
        await self.session.commit()
        logger.info("Deleted %s document for supplier %s", doc_type.value, supplier_id)
