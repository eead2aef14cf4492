"""Category DTOs."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryCreate(BaseModel):
    """Create category request."""

    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Category name is required")
        return value


class CategoryResponse(BaseModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    supplier_count: int = 0
    created_at: datetime | None = None


class CategoryListResponse(BaseModel):
    """Category list response."""

    items: list[CategoryResponse]
    total: int


class CategorySeedResponse(BaseModel):
    """Result of seeding default categories."""

    seeded: bool
    count: int
    message: str
