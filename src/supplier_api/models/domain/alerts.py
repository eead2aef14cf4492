"""Alert aggregation domain models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from supplier_api.models.domain.compliance import AlertDetail, AlertLevel, SupplierCompliance


class SupplierAssessment(BaseModel):
    """A supplier together with its derived compliance fields."""

    model_config = ConfigDict(frozen=True)

    supplier_id: UUID
    supplier_name: str
    compliance: SupplierCompliance


class SupplierAlert(BaseModel):
    """Notification panel entry for a supplier that needs attention."""

    model_config = ConfigDict(frozen=True)

    supplier_id: UUID
    supplier_name: str
    alert_level: AlertLevel
    alerts: list[AlertDetail]
    messages: list[str]


class AlertCounts(BaseModel):
    """Number of suppliers per alert level."""

    model_config = ConfigDict(frozen=True)

    critical: int = 0
    warning: int = 0
    action_needed: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.warning + self.action_needed


class AlertAggregate(BaseModel):
    """Alert counts, priority-sorted alerts and badge count across suppliers."""

    model_config = ConfigDict(frozen=True)

    counts: AlertCounts
    sorted_alerts: list[SupplierAlert]
    badge_count: int
