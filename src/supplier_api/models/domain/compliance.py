"""Compliance domain models.

Derived, never persisted: every value here is recomputed from a supplier's
document set, its two expiration dates and an explicit "today".
"""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class DocumentType(StrEnum):
    """Required compliance document types, in canonical order."""

    BUSINESS_REGISTRATION = "business_registration"
    NIS_COMPLIANCE = "nis_compliance"
    GRA_COMPLIANCE = "gra_compliance"
    TIN_CERTIFICATE = "tin_certificate"

    @property
    def display_name(self) -> str:
        """Human-readable name used in alert messages."""
        return DOCUMENT_DISPLAY_NAMES[self]


# Definition order of the enum is the canonical order
REQUIRED_DOCUMENT_TYPES: tuple[DocumentType, ...] = tuple(DocumentType)

DOCUMENT_DISPLAY_NAMES: dict[DocumentType, str] = {
    DocumentType.BUSINESS_REGISTRATION: "Business Registration",
    DocumentType.NIS_COMPLIANCE: "NIS Compliance Certificate",
    DocumentType.GRA_COMPLIANCE: "GRA Compliance Certificate",
    DocumentType.TIN_CERTIFICATE: "TIN Certificate",
}


class AlertLevel(StrEnum):
    """Worst-case severity of a supplier. Absence of a level means no alert."""

    CRITICAL = "critical"
    WARNING = "warning"
    ACTION_NEEDED = "action_needed"

    @property
    def rank(self) -> int:
        """Sort rank, most severe first."""
        return ALERT_LEVEL_RANKS[self]


ALERT_LEVEL_RANKS: dict[AlertLevel, int] = {
    AlertLevel.CRITICAL: 1,
    AlertLevel.WARNING: 2,
    AlertLevel.ACTION_NEEDED: 3,
}


class AlertType(StrEnum):
    """Kind of alert detail."""

    EXPIRED = "expired"
    EXPIRING = "expiring"
    MISSING = "missing"


class AlertField(StrEnum):
    """Item an alert detail refers to."""

    NIS = "nis"
    GRA = "gra"
    DOCUMENTS = "documents"


class AlertDetail(BaseModel):
    """One reason a supplier needs attention."""

    model_config = ConfigDict(frozen=True)

    type: AlertType
    field: AlertField
    message: str
    date: str | None = None
    missing: list[DocumentType] | None = None


class ComplianceStatus(BaseModel):
    """Date-only expired/not-expired view, independent of documents."""

    model_config = ConfigDict(frozen=True)

    nis_expired: bool
    gra_expired: bool
    all_compliant: bool
    message: str


class Classification(BaseModel):
    """Alert level, ordered details and compliance status of one supplier."""

    model_config = ConfigDict(frozen=True)

    level: AlertLevel | None
    details: list[AlertDetail]
    compliance_status: ComplianceStatus


class SupplierCompliance(BaseModel):
    """Derived fields added to a supplier record on every read."""

    model_config = ConfigDict(frozen=True)

    nis_days_remaining: int | None
    gra_days_remaining: int | None
    missing_documents: list[DocumentType]
    alert_level: AlertLevel | None
    alert_details: list[AlertDetail]
    nis_compliant: bool | None
    gra_compliant: bool | None
    compliance_status: ComplianceStatus
    is_fully_compliant: bool


def format_date(value: date | None) -> str | None:
    """Render a date as ISO ``YYYY-MM-DD``."""
    return value.isoformat() if value is not None else None
