"""API routers package."""

from supplier_api.routers import alerts, auth, categories, contracts, documents, statistics, suppliers

__all__ = [
    "alerts",
    "auth",
    "categories",
    "contracts",
    "documents",
    "statistics",
    "suppliers",
]
