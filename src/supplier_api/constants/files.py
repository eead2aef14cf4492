"""Upload validation constants."""

from typing import Final

PDF_MIME_TYPE: Final[str] = "application/pdf"

# Browsers occasionally report these for PDFs; content is still signature-checked
ACCEPTED_PDF_MIME_TYPES: Final[frozenset[str]] = frozenset(
    {PDF_MIME_TYPE, "application/x-pdf", "application/octet-stream"}
)

PDF_SIGNATURE: Final[bytes] = b"%PDF"

# Sub-directory of the data directory holding stored blobs
BLOB_DIR_NAME: Final[str] = "blobs"
