"""Centralized dependency injection factories for FastAPI.

Service factories plus the per-request compliance inputs: "today" in the
business timezone and the warning threshold.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.config import get_settings
from supplier_api.constants.files import BLOB_DIR_NAME
from supplier_api.database import get_db
from supplier_api.services.alert_service import AlertService
from supplier_api.services.blob_storage import BlobStorage
from supplier_api.services.category_service import CategoryService
from supplier_api.services.contract_service import ContractService
from supplier_api.services.document_service import DocumentService
from supplier_api.services.statistics_service import StatisticsService
from supplier_api.services.supplier_service import SupplierService


# =============================================================================
# Compliance Inputs
# =============================================================================


def get_today() -> date:
    """Get the current calendar day in the business timezone.

    Resolved once per request so every supplier in a response is evaluated
    against the same day.
    """
    return datetime.now(ZoneInfo(get_settings().business_timezone)).date()


def get_warning_threshold_days() -> int:
    """Get the inclusive warning window in days."""
    return get_settings().alert_warning_threshold_days


def get_max_upload_size() -> int:
    """Get the maximum accepted upload size in bytes."""
    return get_settings().max_upload_size_bytes


# =============================================================================
# Storage
# =============================================================================


def get_blob_storage() -> BlobStorage:
    """Get BlobStorage rooted in the configured data directory."""
    return BlobStorage(get_settings().data_dir / BLOB_DIR_NAME)


# =============================================================================
# Service Factories
# =============================================================================


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    """Get CategoryService instance."""
    return CategoryService(db)


def get_supplier_service(
    db: AsyncSession = Depends(get_db),
    storage: BlobStorage = Depends(get_blob_storage),
) -> SupplierService:
    """Get SupplierService instance."""
    return SupplierService(db, storage)


def get_document_service(
    db: AsyncSession = Depends(get_db),
    storage: BlobStorage = Depends(get_blob_storage),
) -> DocumentService:
    """Get DocumentService instance."""
    return DocumentService(db, storage)


def get_contract_service(
    db: AsyncSession = Depends(get_db),
    storage: BlobStorage = Depends(get_blob_storage),
) -> ContractService:
    """Get ContractService instance."""
    return ContractService(db, storage)


def get_alert_service(db: AsyncSession = Depends(get_db)) -> AlertService:
    """Get AlertService instance."""
    return AlertService(db)


def get_statistics_service(db: AsyncSession = Depends(get_db)) -> StatisticsService:
    """Get StatisticsService instance."""
    return StatisticsService(db)
