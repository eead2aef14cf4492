"""Repositories package."""

from supplier_api.repositories.base import BaseRepository
from supplier_api.repositories.category_repository import CategoryRepository
from supplier_api.repositories.contract_repository import (
    ContractFileRepository,
    ContractRepository,
)
from supplier_api.repositories.document_repository import DocumentRepository
from supplier_api.repositories.supplier_repository import SupplierRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "ContractFileRepository",
    "ContractRepository",
    "DocumentRepository",
    "SupplierRepository",
]
