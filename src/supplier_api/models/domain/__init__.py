"""Domain models package."""

from supplier_api.models.domain.alerts import (
    AlertAggregate,
    AlertCounts,
    SupplierAlert,
    SupplierAssessment,
)
from supplier_api.models.domain.compliance import (
    REQUIRED_DOCUMENT_TYPES,
    AlertDetail,
    AlertField,
    AlertLevel,
    AlertType,
    Classification,
    ComplianceStatus,
    DocumentType,
    SupplierCompliance,
)

__all__ = [
    "REQUIRED_DOCUMENT_TYPES",
    "AlertAggregate",
    "AlertCounts",
    "AlertDetail",
    "AlertField",
    "AlertLevel",
    "AlertType",
    "Classification",
    "ComplianceStatus",
    "DocumentType",
    "SupplierAlert",
    "SupplierAssessment",
    "SupplierCompliance",
]
