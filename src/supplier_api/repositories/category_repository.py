"""Category repository."""

from uuid import UUID

from sqlalchemy import func, select

from supplier_api.models.orm.category import CategoryORM
from supplier_api.models.orm.supplier_category import supplier_categories
from supplier_api.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[CategoryORM]):
    """Repository for category operations."""

    model = CategoryORM

    async def get_all(self) -> list[CategoryORM]:
        """Get all categories ordered by name."""
        result = await self.session.execute(select(CategoryORM).order_by(CategoryORM.name))
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> CategoryORM | None:
        """Get a category by name, ignoring case."""
        result = await self.session.execute(
            select(CategoryORM).where(func.lower(CategoryORM.name) == name.lower())
        )
        return result.scalar_one_or_none()

    async def count_suppliers(self, category_id: UUID) -> int:
        """Count suppliers associated with a category."""
        result = await self.session.execute(
            select(func.count())
            .select_from(supplier_categories)
            .where(supplier_categories.c.category_id == category_id)
        )
        return result.scalar_one()

    async def get_supplier_counts(self) -> dict[UUID, int]:
        """Get supplier counts for all categories in one query."""
        result = await self.session.execute(
            select(supplier_categories.c.category_id, func.count())
            .group_by(supplier_categories.c.category_id)
        )
        return {row[0]: row[1] for row in result.all()}

    async def create_many(self, names: list[str]) -> list[CategoryORM]:
        """Create several categories at once."""
        categories = [CategoryORM(name=name) for name in names]
        self.session.add_all(categories)
        await self.session.flush()
        return categories
