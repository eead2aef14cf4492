"""Business logic services package."""

from supplier_api.services.alert_aggregator import aggregate_alerts, render_alert_lines
from supplier_api.services.alert_service import AlertService
from supplier_api.services.blob_storage import BlobStorage
from supplier_api.services.category_service import CategoryService
from supplier_api.services.compliance_calculator import evaluate_supplier
from supplier_api.services.contract_service import ContractService
from supplier_api.services.document_service import DocumentService
from supplier_api.services.statistics_service import StatisticsService
from supplier_api.services.supplier_service import SupplierService

__all__ = [
    "AlertService",
    "BlobStorage",
    "CategoryService",
    "ContractService",
    "DocumentService",
    "StatisticsService",
    "SupplierService",
    "aggregate_alerts",
    "evaluate_supplier",
    "render_alert_lines",
]
