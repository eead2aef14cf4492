"""Contract repository."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from supplier_api.models.orm.contract import ContractFileORM, ContractORM
from supplier_api.models.orm.supplier import SupplierORM
from supplier_api.repositories.base import BaseRepository


class ContractRepository(BaseRepository[ContractORM]):
    """Repository for contract operations."""

    model = ContractORM

    async def get_all_with_files(self, supplier_id: UUID | None = None) -> list[ContractORM]:
        """Get contracts with their files and supplier, ordered by contract number."""
        query = select(ContractORM).options(
            selectinload(ContractORM.files),
            selectinload(ContractORM.supplier),
        )
        if supplier_id is not None:
            query = query.where(ContractORM.supplier_id == supplier_id)
        result = await self.session.execute(query.order_by(ContractORM.contract_number))
        return list(result.scalars().all())

    async def get_with_files(self, contract_id: UUID) -> ContractORM | None:
        """Get one contract with its files and supplier."""
        result = await self.session.execute(
            select(ContractORM)
            .options(selectinload(ContractORM.files), selectinload(ContractORM.supplier))
            .where(ContractORM.id == contract_id)
        )
        return result.scalar_one_or_none()

    async def get_by_number(self, contract_number: str) -> ContractORM | None:
        """Get a contract by its number (case-sensitive)."""
        result = await self.session.execute(
            select(ContractORM).where(ContractORM.contract_number == contract_number)
        )
        return result.scalar_one_or_none()

    async def get_totals(self, supplier_id: UUID | None = None) -> tuple[int, Decimal]:
        """Get contract count and summed amount.

        Args:
            supplier_id: Restrict to one supplier

        Returns:
            Tuple (count, total amount)
        """
        query = select(func.count(ContractORM.id), func.coalesce(func.sum(ContractORM.amount), 0))
        if supplier_id is not None:
            query = query.where(ContractORM.supplier_id == supplier_id)
        count, total = (await self.session.execute(query)).one()
        return count, Decimal(str(total))

    async def get_totals_by_supplier(self) -> list[tuple[UUID, str, int, Decimal]]:
        """Get contract count and summed amount per supplier, ordered by supplier name."""
        result = await self.session.execute(
            select(
                SupplierORM.id,
                SupplierORM.name,
                func.count(ContractORM.id),
                func.coalesce(func.sum(ContractORM.amount), 0),
            )
            .join(ContractORM, ContractORM.supplier_id == SupplierORM.id)
            .group_by(SupplierORM.id, SupplierORM.name)
            .order_by(SupplierORM.name)
        )
        return [(row[0], row[1], row[2], Decimal(str(row[3]))) for row in result.all()]


class ContractFileRepository(BaseRepository[ContractFileORM]):
    """Repository for contract file operations."""

    model = ContractFileORM

    async def get_for_contract(self, contract_id: UUID, file_id: UUID) -> ContractFileORM | None:
        """Get a file that belongs to the given contract."""
        result = await self.session.execute(
            select(ContractFileORM).where(
                ContractFileORM.id == file_id,
                ContractFileORM.contract_id == contract_id,
            )
        )
        return result.scalar_one_or_none()
