"""Category service."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.exceptions import (
    CategoryAlreadyExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
)
from supplier_api.models.dto.category import (
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
    CategorySeedResponse,
)
from supplier_api.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for category operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.category_repo = CategoryRepository(session)

    async def list_categories(self) -> CategoryListResponse:
        """List categories ordered by name, with supplier counts."""
        categories = await self.category_repo.get_all()
        counts = await self.category_repo.get_supplier_counts()
        items = [
            CategoryResponse(
                id=c.id,
                name=c.name,
                supplier_count=counts.get(c.id, 0),
                created_at=c.created_at,
            )
            for c in categories
        ]
        return CategoryListResponse(items=items, total=len(items))

    async def create_category(self, data: CategoryCreate) -> CategoryResponse:
        """Create a category.

        Raises:
            CategoryAlreadyExistsError: If the name exists, ignoring case
        """
        if await self.category_repo.get_by_name(data.name) is not None:
            raise CategoryAlreadyExistsError(data.name)

        category = await self.category_repo.create(name=data.name)
        await self.session.commit()
        logger.info("Created category %s", category.id)
        return CategoryResponse(id=category.id, name=category.name, created_at=category.created_at)

    async def delete_category(self, category_id: UUID) -> None:
        """Delete a category no supplier references.

        Raises:
            CategoryNotFoundError: If the category does not exist
            CategoryInUseError: If suppliers are still associated with it
        """
        category = await self.category_repo.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError([str(category_id)])

        supplier_count = await self.category_repo.count_suppliers(category_id)
        if supplier_count:
            raise CategoryInUseError(supplier_count)

        await self.category_repo.delete(category)
        await self.session.commit()
        logger.info("Deleted category %s", category_id)

    async def seed_defaults(self, names: list[str]) -> CategorySeedResponse:
        """Create the default categories when none exist yet.

        Args:
            names: Category names to create

        Returns:
            CategorySeedResponse telling whether anything was created
        """
        existing = await self.category_repo.count()
        if existing:
            return CategorySeedResponse(
                seeded=False, count=existing, message="Categories already exist"
            )

        # Keep the first spelling of names that only differ in case
        unique_names: dict[str, str] = {}
        for name in names:
            name = name.strip()
            if name:
                unique_names.setdefault(name.lower(), name)
        created = await self.category_repo.create_many(list(unique_names.values()))
        await self.session.commit()
        logger.info("Seeded %d default categories", len(created))
        return CategorySeedResponse(
            seeded=True, count=len(created), message="Default categories created"
        )
