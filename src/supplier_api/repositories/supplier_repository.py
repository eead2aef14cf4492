"""Supplier repository."""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.orm import selectinload

from supplier_api.models.orm.category import CategoryORM
from supplier_api.models.orm.contract import ContractORM
from supplier_api.models.orm.supplier import SupplierORM
from supplier_api.models.orm.supplier_category import supplier_categories
from supplier_api.repositories.base import BaseRepository


class SupplierRepository(BaseRepository[SupplierORM]):
    """Repository for supplier operations.

    Reads always load categories and documents, which the compliance
    calculations need.
    """

    model = SupplierORM

    @staticmethod
    def _with_relations():
        return select(SupplierORM).options(
            selectinload(SupplierORM.categories),
            selectinload(SupplierORM.documents),
        )

    async def get_all_with_relations(
        self,
        category_id: UUID | None = None,
        search: str | None = None,
    ) -> list[SupplierORM]:
        """Get suppliers with categories and documents, ordered by name.

        Args:
            category_id: Only suppliers associated with this category
            search: Substring matched against name, address and telephone

        Returns:
            List of suppliers
        """
        query = self._with_relations()

        if category_id is not None:
            query = query.where(
                SupplierORM.id.in_(
                    select(supplier_categories.c.supplier_id).where(
                        supplier_categories.c.category_id == category_id
                    )
                )
            )

        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    SupplierORM.name.ilike(pattern),
                    SupplierORM.address.ilike(pattern),
                    SupplierORM.telephone.ilike(pattern),
                )
            )

        result = await self.session.execute(query.order_by(SupplierORM.name, SupplierORM.id))
        return list(result.scalars().all())

    async def get_with_relations(self, supplier_id: UUID) -> SupplierORM | None:
        """Get one supplier with categories and documents."""
        result = await self.session.execute(
            self._with_relations().where(SupplierORM.id == supplier_id)
        )
        return result.scalar_one_or_none()

    async def set_categories(self, supplier: SupplierORM, categories: list[CategoryORM]) -> None:
        """Replace the supplier's category set.

        The legacy ``category_id`` column follows the first category.
        """
        supplier.categories = list(categories)
        supplier.category_id = categories[0].id if categories else None
        await self.session.flush()

    async def count_contracts(self, supplier_id: UUID) -> int:
        """Count contracts belonging to a supplier."""
        result = await self.session.execute(
            select(func.count())
            .select_from(ContractORM)
            .where(ContractORM.supplier_id == supplier_id)
        )
        return result.scalar_one()

    async def touch(self, supplier: SupplierORM) -> None:
        """Bump the supplier's ``updated_at`` timestamp."""
        supplier.updated_at = datetime.now(timezone.utc)
        await self.session.flush()
