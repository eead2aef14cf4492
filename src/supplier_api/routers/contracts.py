"""Contracts router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response

from supplier_api.dependencies import get_contract_service, get_max_upload_size
from supplier_api.models.dto.contract import (
    ContractCreate,
    ContractFileResponse,
    ContractListResponse,
    ContractResponse,
    ContractTotalsResponse,
    ContractUpdate,
)
from supplier_api.routers.documents import pdf_response
from supplier_api.security.auth import require_token
from supplier_api.services.contract_service import ContractService

router = APIRouter(dependencies=[Depends(require_token)])


@router.get("", response_model=ContractListResponse)
async def list_contracts(
    service: Annotated[ContractService, Depends(get_contract_service)],
    supplier_id: UUID | None = None,
) -> ContractListResponse:
    """List contracts ordered by contract number."""
    return await service.list_contracts(supplier_id)


@router.get("/totals", response_model=ContractTotalsResponse)
async def get_contract_totals(
    service: Annotated[ContractService, Depends(get_contract_service)],
) -> ContractTotalsResponse:
    """Get contract count and value overall and per supplier."""
    return await service.get_totals()


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(
    data: ContractCreate,
    service: Annotated[ContractService, Depends(get_contract_service)],
) -> ContractResponse:
    """Create a contract."""
    return await service.create_contract(data)


@router.get("/{contract_id}", response_model=ContractResponse)
async def get_contract(
    contract_id: UUID,
    service: Annotated[ContractService, Depends(get_contract_service)],
) -> ContractResponse:
    """Get a contract with its files."""
    return await service.get_contract(contract_id)


@router.put("/{contract_id}", response_model=ContractResponse)
async def update_contract(
    contract_id: UUID,
    data: ContractUpdate,
    service: Annotated[ContractService, Depends(get_contract_service)],
) -> ContractResponse:
    """Update a contract."""
    return await service.update_contract(contract_id, data)


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contract(
    contract_id: UUID,
    service: Annotated[ContractService, Depends(get_contract_service)],
) -> None:
    """Delete a contract and its files."""
    await service.delete_contract(contract_id)


@router.post(
    "/{contract_id}/files",
    response_model=ContractFileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_contract_file(
    contract_id: UUID,
    service: Annotated[ContractService, Depends(get_contract_service)],
    max_size: Annotated[int, Depends(get_max_upload_size)],
    file: UploadFile = File(...),
) -> ContractFileResponse:
    """Attach a PDF to a contract."""
    content = await file.read(max_size + 1)
    return await service.upload_file(
        contract_id, file.filename, content, file.content_type, max_size
    )


@router.get("/{contract_id}/files/{file_id}")
async def get_contract_file(
    contract_id: UUID,
    file_id: UUID,
    service: Annotated[ContractService, Depends(get_contract_service)],
) -> Response:
    """Download a contract file."""
    return pdf_response(await service.get_file(contract_id, file_id))


@router.delete("/{contract_id}/files/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contract_file(
    contract_id: UUID,
    file_id: UUID,
    service: Annotated[ContractService, Depends(get_contract_service)],
) -> None:
    """Delete a contract file."""
    await service.delete_file(contract_id, file_id)
