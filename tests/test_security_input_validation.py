"""Input sanitization tests.

SQLAlchemy parameterizes every query, which is the primary protection. These
tests cover the sanitization applied on top of it: search terms, storage key
segments, uploaded filenames and error log messages.
"""

import logging
import os
from pathlib import Path

import pytest

from supplier_api.services.blob_storage import BlobStorage
from supplier_api.utils.secure_logging import log_error
from supplier_api.utils.validation import (
    sanitize_filename,
    sanitize_key_segment,
    sanitize_search,
)

SQL_INJECTION_PAYLOADS = [
    "'; DROP TABLE suppliers; --",
    "1' OR '1'='1",
    "1; DELETE FROM documents WHERE '1'='1",
    "' UNION SELECT * FROM categories --",
    "1'; SELECT pg_sleep(5) --",
    "1'/**/OR/**/1=1--",
    "$$; DROP TABLE suppliers; $$",
    "1'\x00 OR 1=1 --",
]

PATH_TRAVERSAL_PAYLOADS = [
    "../../etc/passwd",
    "..\\..\\windows\\system32\\config",
    "/etc/shadow",
    "nested/../../escape.pdf",
]


class TestSearchSanitization:
    """Tests for supplier search input."""

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS)
    def test_search_parameter_sanitized(self, payload: str) -> None:
        result = sanitize_search(payload)

        if result is not None:
            assert ";" not in result
            assert "--" not in result
            assert len(result) <= 200

    def test_max_length_enforcement(self) -> None:
        result = sanitize_search("A" * 1000)
        assert result is not None
        assert len(result) == 200

    def test_empty_and_none_handling(self) -> None:
        assert sanitize_search(None) is None
        assert sanitize_search("") is None
        assert sanitize_search("   ") is None
        assert sanitize_search(";--") is None

    def test_plain_text_untouched(self) -> None:
        assert sanitize_search("  Acme Ltd  ") == "Acme Ltd"


class TestStorageKeys:
    """Tests for blob keys and filenames."""

    def test_key_segment_replaces_non_alphanumerics(self) -> None:
        assert sanitize_key_segment("Acme Ltd.") == "acme_ltd_"
        assert sanitize_key_segment("../../x") == "______x"
        assert sanitize_key_segment("Café & Co") == "caf____co"

    @pytest.mark.parametrize("payload", PATH_TRAVERSAL_PAYLOADS)
    def test_filename_strips_directories(self, payload: str) -> None:
        result = sanitize_filename(payload)
        assert "/" not in result
        assert "\\" not in result
        assert result not in {"", ".", ".."}

    def test_filename_default(self) -> None:
        assert sanitize_filename(None) == "document.pdf"
        assert sanitize_filename("dir/..") == "document.pdf"

    @pytest.mark.parametrize("payload", PATH_TRAVERSAL_PAYLOADS)
    def test_storage_rejects_escaping_keys(self, payload: str, tmp_path: Path) -> None:
        storage = BlobStorage(tmp_path / "blobs")
        with pytest.raises(ValueError):
            storage.put(payload.replace("\\", "/"), b"%PDF")

    def test_storage_round_trip_and_delete(self, tmp_path: Path) -> None:
        storage = BlobStorage(tmp_path)
        key = "suppliers/abc/acme/nis_compliance_1.pdf"

        storage.put(key, b"%PDF-1.4")
        assert storage.get(key) == b"%PDF-1.4"

        storage.delete(key)
        assert storage.get(key) is None
        # Deleting again is a no-op
        storage.delete(key)

    def test_delete_quietly_reports_failure(self, tmp_path: Path) -> None:
        storage = BlobStorage(tmp_path)
        assert storage.delete_quietly("missing/blob.pdf") is True
        assert storage.delete_quietly("../outside.pdf") is False

    def test_document_key_format(self) -> None:
        from uuid import uuid4

        supplier_id = uuid4()
        key = BlobStorage.document_key(supplier_id, "Acme Ltd.", "gra_compliance")
        prefix = f"suppliers/{supplier_id}/acme_ltd_/gra_compliance_"
        assert key.startswith(prefix)
        assert key.endswith(".pdf")
        assert key[len(prefix):-4].isdigit()


class TestSecureLogging:
    """Error logs must not carry paths or connection strings outside debug mode."""

    def test_log_error_sanitizes_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("supplier_api.tests.secure_logging")
        error = RuntimeError(
            "could not open /var/lib/supplier/data/blobs/x.pdf via "
            "postgresql://supplier:secret@db:5432/supplier_api"
        )

        with caplog.at_level(logging.ERROR, logger=logger.name):
            log_error(logger, "Database error for /api/v1/suppliers", error)

        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert message.startswith("Database error for /api/v1/suppliers: ")
        assert "/var/lib/supplier" not in message
        assert "secret" not in message
        assert "[PATH]" in message
        assert "[URL]" in message

    async def test_unhandled_errors_are_logged_sanitized(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        from starlette.requests import Request

        from supplier_api.middleware.error_handler import generic_exception_handler

        request = Request(
            {"type": "http", "method": "GET", "path": "/api/v1/alerts", "headers": []}
        )

        with caplog.at_level(logging.ERROR, logger="supplier_api.middleware.error_handler"):
            response = await generic_exception_handler(
                request, RuntimeError("boom at /srv/app/secret.py")
            )

        assert response.status_code == 500
        assert "/srv/app" not in caplog.text
        assert "Unhandled exception for /api/v1/alerts" in caplog.text


class TestNoRawSQL:
    """Verify no raw SQL usage in repositories."""

    def test_no_text_import_in_repositories(self) -> None:
        repo_dir = os.path.join(
            os.path.dirname(__file__), "..", "src", "supplier_api", "repositories"
        )
        if not os.path.exists(repo_dir):
            pytest.skip("Repository directory not found")

        for filename in os.listdir(repo_dir):
            if not filename.endswith(".py"):
                continue
            with open(os.path.join(repo_dir, filename)) as f:
                for i, line in enumerate(f, 1):
                    if ".execute(text(" in line or "= text(" in line:
                        pytest.fail(f"Potential raw SQL in {filename}:{i}: {line.strip()}")
