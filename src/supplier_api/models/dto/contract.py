"""Contract DTOs."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ContractBase(BaseModel):
    """Fields shared by create and update requests."""

    description: str | None = Field(default=None, max_length=5000)
    amount: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    start_date: date | None = None
    end_date: date | None = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ContractCreate(ContractBase):
    """Create contract request."""

    contract_number: str = Field(min_length=1, max_length=100)
    supplier_id: UUID

    @field_validator("contract_number")
    @classmethod
    def strip_number(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Contract number is required")
        return value


class ContractUpdate(ContractBase):
    """Update contract request. Only fields that are set are changed."""

    contract_number: str | None = Field(default=None, min_length=1, max_length=100)
    supplier_id: UUID | None = None

    @field_validator("contract_number")
    @classmethod
    def strip_number(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("Contract number is required")
        return value


class ContractFileResponse(BaseModel):
    """Contract file response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    contract_id: UUID
    file_name: str
    file_size: int
    uploaded_at: datetime


class ContractResponse(BaseModel):
    """Contract response."""

    id: UUID
    contract_number: str
    supplier_id: UUID
    supplier_name: str
    description: str | None
    amount: Decimal | None
    start_date: date | None
    end_date: date | None
    files: list[ContractFileResponse]
    created_at: datetime
    updated_at: datetime


class ContractListResponse(BaseModel):
    """Contract list response."""

    items: list[ContractResponse]
    total: int
    total_amount: Decimal


class SupplierContractTotals(BaseModel):
    """Contract totals of one supplier."""

    supplier_id: UUID
    supplier_name: str
    count: int
    total_amount: Decimal


class ContractTotalsResponse(BaseModel):
    """Contract totals overall and per supplier."""

    count: int
    total_amount: Decimal
    by_supplier: list[SupplierContractTotals]
