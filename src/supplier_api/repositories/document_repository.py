"""Compliance document repository."""

from uuid import UUID

from sqlalchemy import select

from supplier_api.models.orm.document import DocumentORM
from supplier_api.repositories.base import BaseRepository


class DocumentRepository(BaseRepository[DocumentORM]):
    """Repository for compliance document operations."""

    model = DocumentORM

    async def get_by_supplier_and_type(
        self, supplier_id: UUID, document_type: str
    ) -> DocumentORM | None:
        """Get a supplier's document of the given type."""
        result = await self.session.execute(
            select(DocumentORM).where(
                DocumentORM.supplier_id == supplier_id,
                DocumentORM.document_type == document_type,
            )
        )
        return result.scalar_one_or_none()

    async def get_by_supplier(self, supplier_id: UUID) -> list[DocumentORM]:
        """Get all documents of a supplier."""
        result = await self.session.execute(
            select(DocumentORM).where(DocumentORM.supplier_id == supplier_id)
        )
        return list(result.scalars().all())
