"""Category ORM model."""

from sqlalchemy import Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from supplier_api.models.orm.base import Base, TimestampMixin, UUIDMixin
from supplier_api.models.orm.supplier_category import supplier_categories


class CategoryORM(Base, UUIDMixin, TimestampMixin):
    """Category database model."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    suppliers: Mapped[list["SupplierORM"]] = relationship(
        "SupplierORM",
        secondary=supplier_categories,
        back_populates="categories",
        lazy="select",
        # Deletion is refused while links exist, so never load them on delete
        passive_deletes=True,
    )


# Names are unique regardless of case
Index("uq_categories_name_lower", func.lower(CategoryORM.name), unique=True)


# Import here to avoid circular import
from supplier_api.models.orm.supplier import SupplierORM  # noqa: E402, F401
