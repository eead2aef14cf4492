"""Supplier/category association table."""

from sqlalchemy import Column, ForeignKey, Table, Uuid

from supplier_api.models.orm.base import Base

supplier_categories = Table(
    "supplier_categories",
    Base.metadata,
    Column(
        "supplier_id",
        Uuid(as_uuid=True),
        ForeignKey("suppliers.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Uuid(as_uuid=True),
        ForeignKey("categories.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
)
