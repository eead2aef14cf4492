"""Compliance document ORM model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from supplier_api.models.orm.base import Base, UUIDMixin


class DocumentORM(Base, UUIDMixin):
    """Uploaded compliance document. At most one per (supplier, document_type)."""

    __tablename__ = "documents"

    supplier_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False
    )
    # business_registration, nis_compliance, gra_compliance, tin_certificate
    document_type: Mapped[str] = mapped_column(String(50), nullable=False)
    # Original uploaded filename
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Opaque locator in blob storage
    storage_key: Mapped[str] = mapped_column(String(500), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    supplier: Mapped["SupplierORM"] = relationship("SupplierORM", back_populates="documents")

    __table_args__ = (
        UniqueConstraint("supplier_id", "document_type", name="uq_document_supplier_type"),
    )


# Import to avoid circular import
from supplier_api.models.orm.supplier import SupplierORM  # noqa: E402, F401
