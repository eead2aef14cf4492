"""Contract ORM models."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from supplier_api.models.orm.base import Base, TimestampMixin, UUIDMixin


class ContractORM(Base, UUIDMixin, TimestampMixin):
    """Contract database model."""

    __tablename__ = "contracts"

    # Globally unique, case-sensitive
    contract_number: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    supplier_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("suppliers.id", ondelete="RESTRICT"), nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    amount: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    supplier: Mapped["SupplierORM"] = relationship("SupplierORM", back_populates="contracts")
    files: Mapped[list["ContractFileORM"]] = relationship(
        "ContractFileORM",
        back_populates="contract",
        lazy="select",
        cascade="all, delete-orphan",
        order_by="ContractFileORM.uploaded_at",
    )

    __table_args__ = (Index("idx_contracts_supplier", "supplier_id"),)


class ContractFileORM(Base, UUIDMixin):
    """File attached to a contract."""

    __tablename__ = "contract_files"

    contract_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("contracts.id", ondelete="CASCADE"), nullable=False
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    storage_key: Mapped[str] = mapped_column(String(500), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    contract: Mapped["ContractORM"] = relationship("ContractORM", back_populates="files")


# Import here to avoid circular import
from supplier_api.models.orm.supplier import SupplierORM  # noqa: E402, F401
