"""Supplier ORM model."""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from supplier_api.models.orm.base import Base, TimestampMixin, UUIDMixin
from supplier_api.models.orm.supplier_category import supplier_categories


class SupplierORM(Base, UUIDMixin, TimestampMixin):
    """Supplier database model."""

    __tablename__ = "suppliers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    telephone: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_person: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Legacy single category, always equal to the first associated category
    category_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    nis_expiration_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    gra_expiration_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships - load explicitly with selectinload() when needed
    categories: Mapped[list["CategoryORM"]] = relationship(
        "CategoryORM",
        secondary=supplier_categories,
        back_populates="suppliers",
        lazy="select",
        order_by="CategoryORM.name",
    )
    documents: Mapped[list["DocumentORM"]] = relationship(
        "DocumentORM", back_populates="supplier", lazy="select", cascade="all, delete-orphan"
    )
    contracts: Mapped[list["ContractORM"]] = relationship(
        "ContractORM", back_populates="supplier", lazy="select", passive_deletes="all"
    )

    __table_args__ = (Index("idx_suppliers_name", "name"),)


# Import here to avoid circular import
from supplier_api.models.orm.category import CategoryORM  # noqa: E402, F401
from supplier_api.models.orm.document import DocumentORM  # noqa: E402, F401
from supplier_api.models.orm.contract import ContractORM  # noqa: E402, F401
