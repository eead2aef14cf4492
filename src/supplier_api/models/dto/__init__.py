"""Data Transfer Objects package."""

from supplier_api.models.dto.alerts import AlertsResponse, AlertSummary, StatisticsResponse
from supplier_api.models.dto.auth import TokenVerifyRequest, TokenVerifyResponse
from supplier_api.models.dto.category import (
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
    CategorySeedResponse,
)
from supplier_api.models.dto.contract import (
    ContractCreate,
    ContractFileResponse,
    ContractListResponse,
    ContractResponse,
    ContractTotalsResponse,
    ContractUpdate,
)
from supplier_api.models.dto.document import DocumentUploadResponse
from supplier_api.models.dto.supplier import (
    SupplierCreate,
    SupplierListResponse,
    SupplierResponse,
    SupplierUpdate,
)

__all__ = [
    "AlertSummary",
    "AlertsResponse",
    "CategoryCreate",
    "CategoryListResponse",
    "CategoryResponse",
    "CategorySeedResponse",
    "ContractCreate",
    "ContractFileResponse",
    "ContractListResponse",
    "ContractResponse",
    "ContractTotalsResponse",
    "ContractUpdate",
    "DocumentUploadResponse",
    "StatisticsResponse",
    "SupplierCreate",
    "SupplierListResponse",
    "SupplierResponse",
    "SupplierUpdate",
    "TokenVerifyRequest",
    "TokenVerifyResponse",
]
