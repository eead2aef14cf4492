"""Categories router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from supplier_api.config import get_settings
from supplier_api.dependencies import get_category_service
from supplier_api.models.dto.category import (
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
    CategorySeedResponse,
)
from supplier_api.security.auth import require_token
from supplier_api.services.category_service import CategoryService

router = APIRouter(dependencies=[Depends(require_token)])


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryListResponse:
    """List all categories ordered by name."""
    return await service.list_categories()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Create a category. Names are unique ignoring case."""
    return await service.create_category(data)


@router.post("/seed", response_model=CategorySeedResponse)
async def seed_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategorySeedResponse:
    """Create the default categories if there are none yet."""
    return await service.seed_defaults(get_settings().default_categories)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> None:
    """Delete a category that no supplier uses."""
    await service.delete_category(category_id)
