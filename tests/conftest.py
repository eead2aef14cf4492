"""Shared test fixtures.

The environment is configured before the application is imported, because
settings are read once and cached.
"""

import os
import tempfile
from datetime import date
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

_TEST_DIR = Path(tempfile.mkdtemp(prefix="supplier-api-tests-"))

os.environ.setdefault("ENVIRONMENT", "development")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR / 'test.db'}"
os.environ["AUTH_TOKEN"] = "test-token-0123456789abcdef"
os.environ["DATA_DIR"] = str(_TEST_DIR / "data")
os.environ["DEBUG"] = "false"
os.environ["CORS_ORIGINS"] = "http://localhost:3000"

from supplier_api.database import engine  # noqa: E402
from supplier_api.dependencies import get_today  # noqa: E402
from supplier_api.main import app  # noqa: E402
from supplier_api.models.orm import Base  # noqa: E402

TEST_TOKEN = os.environ["AUTH_TOKEN"]

# Fixed reference day for every API test
TODAY = date(2025, 6, 15)

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<< >>\n%%EOF\n"


@pytest.fixture(autouse=True)
async def database():
    """Create a fresh schema for each test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled aiosqlite connections must not outlive the test's event loop
    await engine.dispose()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
async def client():
    app.dependency_overrides[get_today] = lambda: TODAY
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": f"Bearer {TEST_TOKEN}"},
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def anon_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def category(client) -> dict:
    resp = await client.post("/api/v1/categories", json={"name": "Office Supplies"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def supplier_payload(category) -> dict:
    return {
        "name": "Acme Ltd.",
        "address": "1 Main Street, Georgetown",
        "telephone": "+592 555 0100",
        "email": "info@acme.example",
        "category_ids": [category["id"]],
    }


@pytest.fixture
async def supplier(client, supplier_payload) -> dict:
    resp = await client.post("/api/v1/suppliers", json=supplier_payload)
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def upload_document(client):
    """Upload a compliance document through the API."""

    async def _upload(supplier_id: str, document_type: str, content: bytes = PDF_BYTES):
        return await client.post(
            f"/api/v1/suppliers/{supplier_id}/documents",
            data={"document_type": document_type},
            files={"file": (f"{document_type}.pdf", content, "application/pdf")},
        )

    return _upload
