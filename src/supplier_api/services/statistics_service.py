"""Dashboard statistics service."""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.models.dto.alerts import StatisticsResponse
from supplier_api.repositories.category_repository import CategoryRepository
from supplier_api.repositories.contract_repository import ContractRepository
from supplier_api.repositories.document_repository import DocumentRepository
from supplier_api.services.alert_aggregator import aggregate_alerts
from supplier_api.services.alert_service import AlertService


class StatisticsService:
    """Service for dashboard statistics."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.alert_service = AlertService(session)
        self.category_repo = CategoryRepository(session)
        self.document_repo = DocumentRepository(session)
        self.contract_repo = ContractRepository(session)

    async def get_statistics(self, today: date, warning_threshold_days: int) -> StatisticsResponse:
        """Compute dashboard statistics.

        Compliance counts come from the same classification as the alerts,
        so ``needs_attention`` always equals the alerts badge count.

        Args:
            today: The reference day
            warning_threshold_days: Inclusive warning window in days

        Returns:
            StatisticsResponse
        """
        assessments = await self.alert_service.assess_all(today, warning_threshold_days)
        aggregate = aggregate_alerts(assessments)
        total_contracts, total_contract_value = await self.contract_repo.get_totals()

        return StatisticsResponse(
            total_suppliers=len(assessments),
            total_categories=await self.category_repo.count(),
            total_documents=await self.document_repo.count(),
            compliant_suppliers=sum(1 for a in assessments if a.compliance.is_fully_compliant),
            nis_expired=sum(1 for a in assessments if a.compliance.compliance_status.nis_expired),
            gra_expired=sum(1 for a in assessments if a.compliance.compliance_status.gra_expired),
            needs_attention=aggregate.badge_count,
            total_contracts=total_contracts,
            total_contract_value=total_contract_value,
        )
