"""Supplier service for CRUD operations with derived compliance fields."""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.exceptions import (
    CategoryNotFoundError,
    SupplierHasContractsError,
    SupplierNotFoundError,
)
from supplier_api.models.domain.alerts import SupplierAssessment
from supplier_api.models.dto.supplier import (
    CategoryRef,
    DocumentInfo,
    SupplierCreate,
    SupplierListResponse,
    SupplierResponse,
    SupplierUpdate,
)
from supplier_api.models.orm.category import CategoryORM
from supplier_api.models.orm.supplier import SupplierORM
from supplier_api.repositories.category_repository import CategoryRepository
from supplier_api.repositories.supplier_repository import SupplierRepository
from supplier_api.services.blob_storage import BlobStorage
from supplier_api.services.compliance_calculator import evaluate_supplier
from supplier_api.utils.validation import sanitize_search

logger = logging.getLogger(__name__)


def assess_supplier(
    supplier: SupplierORM, today: date, warning_threshold_days: int
) -> SupplierAssessment:
    """Evaluate a supplier loaded with its documents."""
    return SupplierAssessment(
        supplier_id=supplier.id,
        supplier_name=supplier.name,
        compliance=evaluate_supplier(
            (doc.document_type for doc in supplier.documents),
            supplier.nis_expiration_date,
            supplier.gra_expiration_date,
            today,
            warning_threshold_days,
        ),
    )


def build_supplier_response(
    supplier: SupplierORM, today: date, warning_threshold_days: int
) -> SupplierResponse:
    """Build the augmented supplier record.

    Args:
        supplier: Supplier loaded with categories and documents
        today: The reference day
        warning_threshold_days: Inclusive warning window in days

    Returns:
        SupplierResponse with stored and derived fields
    """
    compliance = assess_supplier(supplier, today, warning_threshold_days).compliance
    return SupplierResponse(
        id=supplier.id,
        name=supplier.name,
        address=supplier.address,
        telephone=supplier.telephone,
        email=supplier.email,
        contact_person=supplier.contact_person,
        category_id=supplier.category_id,
        category_ids=[c.id for c in supplier.categories],
        categories=[CategoryRef.model_validate(c) for c in supplier.categories],
        documents=[
            DocumentInfo.model_validate(d)
            for d in sorted(supplier.documents, key=lambda d: d.document_type)
        ],
        nis_expiration_date=supplier.nis_expiration_date,
        gra_expiration_date=supplier.gra_expiration_date,
        created_at=supplier.created_at,
        updated_at=supplier.updated_at,
        **compliance.model_dump(),
    )


class SupplierService:
    """Service for supplier operations."""

    def __init__(self, session: AsyncSession, storage: BlobStorage) -> None:
        """Initialize service with database session and blob storage."""
        self.session = session
        self.storage = storage
        self.supplier_repo = SupplierRepository(session)
        self.category_repo = CategoryRepository(session)

    async def _resolve_categories(self, category_ids: list[UUID]) -> list[CategoryORM]:
        """Load categories in the requested order, rejecting unknown IDs."""
        found = {c.id: c for c in await self.category_repo.get_many(category_ids)}
        unknown = [cid for cid in category_ids if cid not in found]
        if unknown:
            raise CategoryNotFoundError([str(cid) for cid in unknown])
        return [found[cid] for cid in category_ids]

    async def _reload(self, supplier_id: UUID) -> SupplierORM:
        # Drop identity-map state so relationships are fetched fresh
        self.session.expunge_all()
        supplier = await self.supplier_repo.get_with_relations(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(str(supplier_id))
        return supplier

    async def list_suppliers(
        self,
        today: date,
        warning_threshold_days: int,
        category_id: UUID | None = None,
        search: str | None = None,
    ) -> SupplierListResponse:
        """List suppliers ordered by name, each with derived fields.

        Args:
            today: The reference day
            warning_threshold_days: Inclusive warning window in days
            category_id: Only suppliers in this category
            search: Substring over name, address and telephone

        Returns:
            SupplierListResponse
        """
        suppliers = await self.supplier_repo.get_all_with_relations(
            category_id=category_id,
            search=sanitize_search(search),
        )
        items = [build_supplier_response(s, today, warning_threshold_days) for s in suppliers]
        return SupplierListResponse(items=items, total=len(items))

    async def get_supplier(
        self, supplier_id: UUID, today: date, warning_threshold_days: int
    ) -> SupplierResponse:
        """Get one supplier with derived fields.

        Raises:
            SupplierNotFoundError: If the supplier does not exist
        """
        supplier = await self.supplier_repo.get_with_relations(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(str(supplier_id))
        return build_supplier_response(supplier, today, warning_threshold_days)

    async def create_supplier(
        self, data: SupplierCreate, today: date, warning_threshold_days: int
    ) -> SupplierResponse:
        """Create a supplier.

        Raises:
            CategoryNotFoundError: If a category ID is unknown
        """
        categories = await self._resolve_categories(data.category_ids)
        supplier = SupplierORM(
            name=data.name,
            address=data.address,
            telephone=data.telephone,
            email=data.email,
            contact_person=data.contact_person,
            category_id=categories[0].id,
            nis_expiration_date=data.nis_expiration_date,
            gra_expiration_date=data.gra_expiration_date,
            categories=categories,
            documents=[],
        )
        self.session.add(supplier)
        await self.session.flush()
        supplier_id = supplier.id
        await self.session.commit()
        logger.info("Created supplier %s", supplier_id)

        supplier = await self._reload(supplier_id)
        return build_supplier_response(supplier, today, warning_threshold_days)

    async def update_supplier(
        self,
        supplier_id: UUID,
        data: SupplierUpdate,
        today: date,
        warning_threshold_days: int,
    ) -> SupplierResponse:
        """Replace a supplier's fields and category set.

        Raises:
            SupplierNotFoundError: If the supplier does not exist
            CategoryNotFoundError: If a category ID is unknown
        """
        supplier = await self.supplier_repo.get_with_relations(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(str(supplier_id))

        categories = await self._resolve_categories(data.category_ids)
        await self.supplier_repo.update(
            supplier,
            name=data.name,
            address=data.address,
            telephone=data.telephone,
            email=data.email,
            contact_person=data.contact_person,
            nis_expiration_date=data.nis_expiration_date,
            gra_expiration_date=data.gra_expiration_date,
        )
        await self.supplier_repo.set_categories(supplier, categories)
        await self.supplier_repo.touch(supplier)
        await self.session.commit()

        supplier = await self._reload(supplier_id)
        return build_supplier_response(supplier, today, warning_threshold_days)

    async def delete_supplier(self, supplier_id: UUID) -> None:
        """Delete a supplier and its documents.

        Stored blobs are removed first on a best-effort basis.

        Raises:
            SupplierNotFoundError: If the supplier does not exist
            SupplierHasContractsError: If contracts still reference the supplier
        """
        supplier = await self.supplier_repo.get_with_relations(supplier_id)
        if supplier is None:
            raise SupplierNotFoundError(str(supplier_id))

        contract_count = await self.supplier_repo.count_contracts(supplier_id)
        if contract_count:
            raise SupplierHasContractsError(contract_count)

        for document in supplier.documents:
            self.storage.delete_quietly(document.storage_key)

        await self.supplier_repo.delete(supplier)
        await self.session.commit()
        logger.info("Deleted supplier %s", supplier_id)
