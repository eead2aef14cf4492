"""SQLAlchemy ORM models package."""

from supplier_api.models.orm.base import Base
from supplier_api.models.orm.category import CategoryORM
from supplier_api.models.orm.supplier_category import supplier_categories
from supplier_api.models.orm.contract import ContractFileORM, ContractORM
from supplier_api.models.orm.document import DocumentORM
from supplier_api.models.orm.supplier import SupplierORM

__all__ = [
    "Base",
    "CategoryORM",
    "ContractFileORM",
    "ContractORM",
    "DocumentORM",
    "SupplierORM",
    "supplier_categories",
]
