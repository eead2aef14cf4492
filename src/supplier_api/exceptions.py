"""Domain-specific exceptions for the supplier API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses, avoiding string matching in routers. The exception
handlers in ``middleware.error_handler`` translate each family into a
status code.
"""

from typing import Any


class SupplierAPIError(Exception):
    """Base exception for all supplier API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(SupplierAPIError):
    """Base class for resource not found errors."""

    pass


class SupplierNotFoundError(NotFoundError):
    """Raised when a supplier cannot be found."""

    def __init__(self, supplier_id: str | None = None) -> None:
        details = {"supplier_id": str(supplier_id)} if supplier_id else {}
        super().__init__("Supplier not found", details)


class CategoryNotFoundError(NotFoundError):
    """Raised when one or more categories cannot be found."""

    def __init__(self, category_ids: list[str] | None = None) -> None:
        details = {"category_ids": [str(c) for c in category_ids]} if category_ids else {}
        super().__init__("Category not found", details)


class DocumentNotFoundError(NotFoundError):
    """Raised when a supplier has no document of the requested type."""

    def __init__(self, document_type: str | None = None) -> None:
        details = {"document_type": document_type} if document_type else {}
        super().__init__("Document not found", details)


class StoredFileMissingError(NotFoundError):
    """Raised when a metadata row points at a blob that no longer exists."""

    def __init__(self, storage_key: str | None = None) -> None:
        details = {"storage_key": storage_key} if storage_key else {}
        super().__init__("Document file not found in storage", details)


class ContractNotFoundError(NotFoundError):
    """Raised when a contract cannot be found."""

    def __init__(self, contract_id: str | None = None) -> None:
        details = {"contract_id": str(contract_id)} if contract_id else {}
        super().__init__("Contract not found", details)


class ContractFileNotFoundError(NotFoundError):
    """Raised when a contract file cannot be found."""

    def __init__(self, file_id: str | None = None) -> None:
        details = {"file_id": str(file_id)} if file_id else {}
        super().__init__("Contract file not found", details)


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(SupplierAPIError):
    """Base class for resource conflict errors."""

    pass


class CategoryAlreadyExistsError(ConflictError):
    """Raised when a category name is already taken (case-insensitive)."""

    def __init__(self, name: str | None = None) -> None:
        details = {"name": name} if name else {}
        super().__init__("Category already exists", details)


class CategoryInUseError(ConflictError):
    """Raised when deleting a category that suppliers still reference."""

    def __init__(self, supplier_count: int = 0) -> None:
        super().__init__(
            "Cannot delete category with associated suppliers",
            {"supplier_count": supplier_count},
        )


class ContractNumberExistsError(ConflictError):
    """Raised when a contract number is already in use."""

    def __init__(self, contract_number: str | None = None) -> None:
        details = {"contract_number": contract_number} if contract_number else {}
        super().__init__("Contract number already exists", details)


class SupplierHasContractsError(ConflictError):
    """Raised when deleting a supplier that still has contracts."""

    def __init__(self, contract_count: int = 0) -> None:
        super().__init__(
            "Cannot delete supplier with existing contracts",
            {"contract_count": contract_count},
        )


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(SupplierAPIError):
    """Base class for validation errors."""

    pass


class InvalidDocumentTypeError(ValidationError):
    """Raised for a document type outside the fixed enumeration."""

    def __init__(self, document_type: str | None = None) -> None:
        details = {"document_type": document_type} if document_type else {}
        super().__init__("Invalid document type", details)


class InvalidUploadError(ValidationError):
    """Raised when an uploaded file fails validation."""

    def __init__(self, message: str = "Invalid file type") -> None:
        super().__init__(message)


class InvalidDateRangeError(ValidationError):
    """Raised when an end date lies before its start date."""

    def __init__(self) -> None:
        super().__init__("end_date must not be before start_date")
