"""Supplier DTOs."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from supplier_api.models.domain.compliance import (
    AlertDetail,
    AlertLevel,
    ComplianceStatus,
    DocumentType,
)


class SupplierBase(BaseModel):
    """Fields shared by create and update requests."""

    name: str = Field(max_length=255)
    address: str = Field(max_length=500)
    telephone: str = Field(max_length=50)
    email: EmailStr | None = None
    contact_person: str | None = Field(default=None, max_length=255)
    category_ids: list[UUID] = Field(default_factory=list, max_length=50)
    # Legacy single-category field, used when category_ids is empty
    category_id: UUID | None = None
    nis_expiration_date: date | None = None
    gra_expiration_date: date | None = None

    @field_validator("name", "address", "telephone")
    @classmethod
    def require_text(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} is required")
        return value

    @field_validator("email", "contact_person", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def require_category(self) -> "SupplierBase":
        if not self.category_ids and self.category_id is not None:
            self.category_ids = [self.category_id]
        # Preserve order, drop duplicates
        self.category_ids = list(dict.fromkeys(self.category_ids))
        if not self.category_ids:
            raise ValueError("At least one category is required")
        return self


class SupplierCreate(SupplierBase):
    """Create supplier request."""

    pass


class SupplierUpdate(SupplierBase):
    """Update supplier request (full replacement)."""

    pass


class CategoryRef(BaseModel):
    """Category reference embedded in supplier responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class DocumentInfo(BaseModel):
    """Uploaded document metadata."""

    model_config = ConfigDict(from_attributes=True)

    document_type: DocumentType
    file_name: str
    file_size: int
    uploaded_at: datetime


class SupplierResponse(BaseModel):
    """Supplier with derived compliance fields."""

    id: UUID
    name: str
    address: str
    telephone: str
    email: str | None
    contact_person: str | None
    category_id: UUID | None
    category_ids: list[UUID]
    categories: list[CategoryRef]
    documents: list[DocumentInfo]
    nis_expiration_date: date | None
    gra_expiration_date: date | None
    created_at: datetime
    updated_at: datetime

    # Derived, recomputed on every read
    nis_days_remaining: int | None
    gra_days_remaining: int | None
    missing_documents: list[DocumentType]
    alert_level: AlertLevel | None
    alert_details: list[AlertDetail]
    nis_compliant: bool | None
    gra_compliant: bool | None
    compliance_status: ComplianceStatus
    is_fully_compliant: bool


class SupplierListResponse(BaseModel):
    """Supplier list response."""

    items: list[SupplierResponse]
    total: int
