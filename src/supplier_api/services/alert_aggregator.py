"""Alert aggregation across suppliers.

Stateless: recomputed from the current supplier assessments on every call.
"""

from collections.abc import Iterable

from supplier_api.constants.compliance import ALERT_BULLET
from supplier_api.models.domain.alerts import (
    AlertAggregate,
    AlertCounts,
    SupplierAlert,
    SupplierAssessment,
)
from supplier_api.models.domain.compliance import AlertDetail, AlertLevel


def render_alert_lines(details: Iterable[AlertDetail]) -> list[str]:
    """Render alert details as bullet lines for the notification panel."""
    return [f"{ALERT_BULLET}{detail.message}" for detail in details]


def aggregate_alerts(assessments: Iterable[SupplierAssessment]) -> AlertAggregate:
    """Aggregate supplier assessments into the alerts summary.

    Suppliers without an alert level are left out. The result is ordered
    critical, warning, action needed; the sort is stable so suppliers of the
    same severity keep their input order (name order when coming from the
    repository).

    Args:
        assessments: Supplier assessments in display order

    Returns:
        AlertAggregate with counts, sorted alerts and badge count
    """
    flagged = [
        SupplierAlert(
            supplier_id=assessment.supplier_id,
            supplier_name=assessment.supplier_name,
            alert_level=assessment.compliance.alert_level,
            alerts=assessment.compliance.alert_details,
            messages=render_alert_lines(assessment.compliance.alert_details),
        )
        for assessment in assessments
        if assessment.compliance.alert_level is not None
    ]

    sorted_alerts = sorted(flagged, key=lambda alert: alert.alert_level.rank)

    counts = AlertCounts(
        critical=sum(1 for a in flagged if a.alert_level == AlertLevel.CRITICAL),
        warning=sum(1 for a in flagged if a.alert_level == AlertLevel.WARNING),
        action_needed=sum(1 for a in flagged if a.alert_level == AlertLevel.ACTION_NEEDED),
    )

    return AlertAggregate(
        counts=counts,
        sorted_alerts=sorted_alerts,
        badge_count=len(flagged),
    )
