"""Dashboard statistics router."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends

from supplier_api.dependencies import (
    get_statistics_service,
    get_today,
    get_warning_threshold_days,
)
from supplier_api.models.dto.alerts import StatisticsResponse
from supplier_api.security.auth import require_token
from supplier_api.services.statistics_service import StatisticsService

router = APIRouter(dependencies=[Depends(require_token)])


@router.get("", response_model=StatisticsResponse)
async def get_statistics(
    service: Annotated[StatisticsService, Depends(get_statistics_service)],
    today: Annotated[date, Depends(get_today)],
    threshold: Annotated[int, Depends(get_warning_threshold_days)],
) -> StatisticsResponse:
    """Get dashboard statistics."""
    return await service.get_statistics(today, threshold)
