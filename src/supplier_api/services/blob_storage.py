"""Blob storage on the local data directory.

Blobs are addressed by opaque, slash-separated keys such as
``suppliers/<id>/<name>/nis_compliance_<timestamp>.pdf``. Keys are resolved
under a single base directory and never allowed to escape it.
"""

import logging
import time
import uuid
from pathlib import Path
from uuid import UUID

from supplier_api.constants.files import PDF_SIGNATURE
from supplier_api.utils.secure_logging import log_warning
from supplier_api.utils.validation import sanitize_key_segment

logger = logging.getLogger(__name__)


class BlobStorage:
    """Store, retrieve and delete blobs by key."""

    def __init__(self, base_dir: Path) -> None:
        """Initialize storage rooted at ``base_dir``."""
        self.base_dir = base_dir

    @staticmethod
    def validate_file_path(file_path: Path, base_dir: Path) -> bool:
        """Validate that file path is within base directory."""
        try:
            resolved = file_path.resolve()
            return resolved.is_relative_to(base_dir.resolve())
        except (ValueError, RuntimeError):
            return False

    @staticmethod
    def is_pdf(content: bytes) -> bool:
        """Check the PDF magic bytes."""
        return content.startswith(PDF_SIGNATURE)

    @staticmethod
    def document_key(supplier_id: UUID, supplier_name: str, document_type: str) -> str:
        """Build the key for a supplier's compliance document.

        The millisecond timestamp makes every upload land on a fresh key, so a
        replacement never overwrites the blob it replaces.
        """
        timestamp = int(time.time() * 1000)
        name = sanitize_key_segment(supplier_name)
        return f"suppliers/{supplier_id}/{name}/{document_type}_{timestamp}.pdf"

    @staticmethod
    def contract_file_key(contract_id: UUID) -> str:
        """Build the key for a file attached to a contract."""
        return f"contracts/{contract_id}/{uuid.uuid4()}.pdf"

    def _path_for(self, key: str) -> Path:
        path = self.base_dir / key
        if not key or key.startswith("/") or not self.validate_file_path(path, self.base_dir):
            raise ValueError("Invalid storage key")
        return path

    def put(self, key: str, content: bytes) -> None:
        """Write a blob, creating parent directories as needed."""
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    def get(self, key: str) -> bytes | None:
        """Read a blob.

        Returns:
            Blob content, or None if nothing is stored under ``key``
        """
        path = self._path_for(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def delete(self, key: str) -> None:
        """Delete a blob. Deleting a missing key is a no-op."""
        self._path_for(key).unlink(missing_ok=True)

    def delete_quietly(self, key: str) -> bool:
        """Delete a blob, logging instead of raising on failure.

        Used for cleanup after the metadata change has been decided; a failure
        here can leave an orphaned blob but never blocks the operation.

        Returns:
            True if the blob is gone
        """
        try:
            self.delete(key)
        except (OSError, ValueError) as e:
            log_warning(logger, "Failed to delete blob from storage", e, storage_key=key)
            return False
        return True
