"""Alert service: loads suppliers, classifies them and aggregates the result."""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.models.domain.alerts import AlertAggregate, SupplierAssessment
from supplier_api.models.dto.alerts import AlertsResponse, AlertSummary
from supplier_api.repositories.supplier_repository import SupplierRepository
from supplier_api.services.alert_aggregator import aggregate_alerts
from supplier_api.services.supplier_service import assess_supplier


class AlertService:
    """Service for the alerts summary."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.supplier_repo = SupplierRepository(session)

    async def assess_all(self, today: date, warning_threshold_days: int) -> list[SupplierAssessment]:
        """Evaluate every supplier, in name order."""
        suppliers = await self.supplier_repo.get_all_with_relations()
        return [assess_supplier(s, today, warning_threshold_days) for s in suppliers]

    async def get_aggregate(self, today: date, warning_threshold_days: int) -> AlertAggregate:
        """Aggregate alerts across all suppliers."""
        return aggregate_alerts(await self.assess_all(today, warning_threshold_days))

    async def get_alerts(self, today: date, warning_threshold_days: int) -> AlertsResponse:
        """Build the alerts summary for the notification panel.

        Args:
            today: The reference day
            warning_threshold_days: Inclusive warning window in days

        Returns:
            AlertsResponse with severity-ordered alerts, counts and badge count
        """
        aggregate = await self.get_aggregate(today, warning_threshold_days)
        counts = aggregate.counts
        return AlertsResponse(
            alerts=aggregate.sorted_alerts,
            summary=AlertSummary(
                critical=counts.critical,
                warning=counts.warning,
                action_needed=counts.action_needed,
                total=counts.total,
            ),
            badge_count=aggregate.badge_count,
        )
