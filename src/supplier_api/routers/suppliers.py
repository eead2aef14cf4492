"""Suppliers router."""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from supplier_api.dependencies import get_supplier_service, get_today, get_warning_threshold_days
from supplier_api.models.dto.supplier import (
    SupplierCreate,
    SupplierListResponse,
    SupplierResponse,
    SupplierUpdate,
)
from supplier_api.security.auth import require_token
from supplier_api.services.supplier_service import SupplierService

router = APIRouter(dependencies=[Depends(require_token)])


@router.get("", response_model=SupplierListResponse)
async def list_suppliers(
    service: Annotated[SupplierService, Depends(get_supplier_service)],
    today: Annotated[date, Depends(get_today)],
    threshold: Annotated[int, Depends(get_warning_threshold_days)],
    category_id: UUID | None = None,
    search: str | None = Query(default=None, max_length=500),
) -> SupplierListResponse:
    """List suppliers ordered by name, with compliance fields."""
    return await service.list_suppliers(today, threshold, category_id=category_id, search=search)


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    data: SupplierCreate,
    service: Annotated[SupplierService, Depends(get_supplier_service)],
    today: Annotated[date, Depends(get_today)],
    threshold: Annotated[int, Depends(get_warning_threshold_days)],
) -> SupplierResponse:
    """Create a supplier."""
    return await service.create_supplier(data, today, threshold)


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: UUID,
    service: Annotated[SupplierService, Depends(get_supplier_service)],
    today: Annotated[date, Depends(get_today)],
    threshold: Annotated[int, Depends(get_warning_threshold_days)],
) -> SupplierResponse:
    """Get a supplier with compliance fields."""
    return await service.get_supplier(supplier_id, today, threshold)


@router.put("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(
    supplier_id: UUID,
    data: SupplierUpdate,
    service: Annotated[SupplierService, Depends(get_supplier_service)],
    today: Annotated[date, Depends(get_today)],
    threshold: Annotated[int, Depends(get_warning_threshold_days)],
) -> SupplierResponse:
    """Update a supplier, replacing its category set."""
    return await service.update_supplier(supplier_id, data, today, threshold)


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: UUID,
    service: Annotated[SupplierService, Depends(get_supplier_service)],
) -> None:
    """Delete a supplier and its documents."""
    await service.delete_supplier(supplier_id)
