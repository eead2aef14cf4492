"""Supplier compliance documents router."""

from typing import Annotated
from urllib.parse import quote
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import Response

from supplier_api.constants.files import PDF_MIME_TYPE
from supplier_api.dependencies import get_document_service, get_max_upload_size
from supplier_api.models.dto.document import DocumentUploadResponse
from supplier_api.security.auth import require_token
from supplier_api.services.document_service import DocumentService, StoredFile

router = APIRouter(dependencies=[Depends(require_token)])


def pdf_response(stored: StoredFile) -> Response:
    """Serve a stored PDF for inline viewing."""
    return Response(
        content=stored.content,
        media_type=PDF_MIME_TYPE,
        headers={
            "Content-Disposition": f"inline; filename*=UTF-8''{quote(stored.file_name)}",
            "Cache-Control": "private, max-age=3600",
        },
    )


@router.post(
    "/{supplier_id}/documents",
    response_model=DocumentUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_document(
    supplier_id: UUID,
    service: Annotated[DocumentService, Depends(get_document_service)],
    max_size: Annotated[int, Depends(get_max_upload_size)],
    document_type: Annotated[str, Form(max_length=50)],
    file: UploadFile = File(...),
) -> DocumentUploadResponse:
    """Upload a compliance document, replacing any existing one of the same type."""
    # Read one byte past the limit so oversize files are detected without reading them whole
    content = await file.read(max_size + 1)
    return await service.upload_document(
        supplier_id,
        document_type,
        file.filename,
        content,
        file.content_type,
        max_size,
    )


@router.get("/{supplier_id}/documents/{document_type}")
async def get_document(
    supplier_id: UUID,
    document_type: str,
    service: Annotated[DocumentService, Depends(get_document_service)],
) -> Response:
    """Download a compliance document."""
    return pdf_response(await service.get_document_file(supplier_id, document_type))


@router.delete(
    "/{supplier_id}/documents/{document_type}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_document(
    supplier_id: UUID,
    document_type: str,
    service: Annotated[DocumentService, Depends(get_document_service)],
) -> None:
    """Delete a compliance document."""
    await service.delete_document(supplier_id, document_type)
