"""Compliance alerts router."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends

from supplier_api.dependencies import get_alert_service, get_today, get_warning_threshold_days
from supplier_api.models.dto.alerts import AlertsResponse
from supplier_api.security.auth import require_token
from supplier_api.services.alert_service import AlertService

router = APIRouter(dependencies=[Depends(require_token)])


@router.get("", response_model=AlertsResponse)
async def get_alerts(
    service: Annotated[AlertService, Depends(get_alert_service)],
    today: Annotated[date, Depends(get_today)],
    threshold: Annotated[int, Depends(get_warning_threshold_days)],
) -> AlertsResponse:
    """Get suppliers needing attention, most severe first."""
    return await service.get_alerts(today, threshold)
