"""Alert and statistics DTOs."""

from decimal import Decimal

from pydantic import BaseModel

from supplier_api.models.domain.alerts import SupplierAlert


class AlertSummary(BaseModel):
    """Supplier counts per alert level."""

    critical: int
    warning: int
    action_needed: int
    total: int


class AlertsResponse(BaseModel):
    """Alerts summary for the notification panel."""

    alerts: list[SupplierAlert]
    summary: AlertSummary
    badge_count: int


class StatisticsResponse(BaseModel):
    """Dashboard statistics."""

    total_suppliers: int
    total_categories: int
    total_documents: int
    compliant_suppliers: int
    nis_expired: int
    gra_expired: int
    needs_attention: int
    total_contracts: int
    total_contract_value: Decimal
