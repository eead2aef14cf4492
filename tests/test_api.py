"""API tests against the ASGI app with a SQLite database."""

from datetime import timedelta

from conftest import PDF_BYTES, TEST_TOKEN, TODAY

ALL_TYPES = ["business_registration", "nis_compliance", "gra_compliance", "tin_certificate"]


class TestHealthAndAuth:
    """Health check and shared token authentication."""

    async def test_health(self, anon_client) -> None:
        resp = await anon_client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy"}

    async def test_missing_token_rejected(self, anon_client) -> None:
        resp = await anon_client.get("/api/v1/suppliers")
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Authentication required"

    async def test_wrong_token_rejected(self, anon_client) -> None:
        resp = await anon_client.get(
            "/api/v1/suppliers", headers={"Authorization": "Bearer not-the-token"}
        )
        assert resp.status_code == 401

    async def test_query_token_accepted(self, anon_client) -> None:
        resp = await anon_client.get("/api/v1/categories", params={"token": TEST_TOKEN})
        assert resp.status_code == 200

    async def test_verify_endpoint(self, anon_client) -> None:
        ok = await anon_client.post("/api/v1/auth/verify", json={"token": TEST_TOKEN})
        assert ok.status_code == 200
        assert ok.json()["success"] is True

        bad = await anon_client.post("/api/v1/auth/verify", json={"token": "wrong"})
        assert bad.status_code == 401
        assert bad.json()["detail"] == "Invalid token"

    async def test_security_headers(self, anon_client) -> None:
        resp = await anon_client.get("/health")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"


class TestCategories:
    """Category endpoints."""

    async def test_create_and_list(self, client) -> None:
        for name in ["Zeta", "  Alpha  "]:
            resp = await client.post("/api/v1/categories", json={"name": name})
            assert resp.status_code == 201

        resp = await client.get("/api/v1/categories")
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 2
        assert [c["name"] for c in data["items"]] == ["Alpha", "Zeta"]
        assert all(c["supplier_count"] == 0 for c in data["items"])

    async def test_duplicate_name_ignores_case(self, client, category) -> None:
        resp = await client.post("/api/v1/categories", json={"name": "OFFICE SUPPLIES"})
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Category already exists"

    async def test_blank_name_rejected(self, client) -> None:
        resp = await client.post("/api/v1/categories", json={"name": "   "})
        assert resp.status_code == 422

    async def test_delete_in_use_refused(self, client, category, supplier) -> None:
        resp = await client.delete(f"/api/v1/categories/{category['id']}")
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Cannot delete category with associated suppliers"

    async def test_delete_unused(self, client, category) -> None:
        resp = await client.delete(f"/api/v1/categories/{category['id']}")
        assert resp.status_code == 204

        resp = await client.delete(f"/api/v1/categories/{category['id']}")
        assert resp.status_code == 404

    async def test_seed_only_when_empty(self, client) -> None:
        first = await client.post("/api/v1/categories/seed")
        assert first.status_code == 200
        assert first.json()["seeded"] is True
        count = first.json()["count"]
        assert count > 0

        second = await client.post("/api/v1/categories/seed")
        assert second.json()["seeded"] is False

        listed = await client.get("/api/v1/categories")
        assert listed.json()["total"] == count


class TestSuppliers:
    """Supplier endpoints."""

    async def test_create_returns_derived_fields(self, client, supplier, category) -> None:
        assert supplier["name"] == "Acme Ltd."
        assert supplier["category_ids"] == [category["id"]]
        assert supplier["category_id"] == category["id"]
        assert supplier["categories"][0]["name"] == "Office Supplies"
        assert supplier["documents"] == []
        assert supplier["missing_documents"] == ALL_TYPES
        assert supplier["alert_level"] == "action_needed"
        assert supplier["nis_days_remaining"] is None
        assert supplier["nis_compliant"] is None
        assert supplier["compliance_status"]["all_compliant"] is True
        assert supplier["is_fully_compliant"] is False

    async def test_required_fields(self, client, supplier_payload) -> None:
        for field in ["name", "address", "telephone"]:
            payload = {**supplier_payload, field: "  "}
            resp = await client.post("/api/v1/suppliers", json=payload)
            assert resp.status_code == 422

    async def test_category_required(self, client, supplier_payload) -> None:
        payload = {**supplier_payload, "category_ids": []}
        resp = await client.post("/api/v1/suppliers", json=payload)
        assert resp.status_code == 422

    async def test_legacy_category_id_accepted(self, client, supplier_payload, category) -> None:
        payload = {**supplier_payload, "category_ids": [], "category_id": category["id"]}
        resp = await client.post("/api/v1/suppliers", json=payload)
        assert resp.status_code == 201
        assert resp.json()["category_ids"] == [category["id"]]

    async def test_unknown_category_rejected(self, client, supplier_payload) -> None:
        payload = {**supplier_payload, "category_ids": ["00000000-0000-0000-0000-000000000001"]}
        resp = await client.post("/api/v1/suppliers", json=payload)
        assert resp.status_code == 404

    async def test_malformed_date_rejected(self, client, supplier_payload) -> None:
        payload = {**supplier_payload, "nis_expiration_date": "2025-13-45"}
        resp = await client.post("/api/v1/suppliers", json=payload)
        assert resp.status_code == 422

    async def test_list_ordered_and_filtered(self, client, supplier_payload, category) -> None:
        other = (await client.post("/api/v1/categories", json={"name": "Catering"})).json()
        for name, cat in [("Zulu Foods", other), ("Bravo Office", category), ("alpha print", category)]:
            resp = await client.post(
                "/api/v1/suppliers",
                json={**supplier_payload, "name": name, "category_ids": [cat["id"]]},
            )
            assert resp.status_code == 201

        names = [s["name"] for s in (await client.get("/api/v1/suppliers")).json()["items"]]
        assert names == sorted(names)

        by_category = await client.get("/api/v1/suppliers", params={"category_id": other["id"]})
        assert [s["name"] for s in by_category.json()["items"]] == ["Zulu Foods"]

        searched = await client.get("/api/v1/suppliers", params={"search": "office"})
        assert [s["name"] for s in searched.json()["items"]] == ["Bravo Office"]

    async def test_search_with_injection_payload(self, client, supplier) -> None:
        resp = await client.get("/api/v1/suppliers", params={"search": "'; DROP TABLE suppliers; --"})
        assert resp.status_code == 200
        assert resp.json()["total"] == 0
        assert (await client.get("/api/v1/suppliers")).json()["total"] == 1

    async def test_update_replaces_categories(self, client, supplier, supplier_payload) -> None:
        first = (await client.post("/api/v1/categories", json={"name": "Furniture"})).json()
        second = (await client.post("/api/v1/categories", json={"name": "Catering"})).json()

        resp = await client.put(
            f"/api/v1/suppliers/{supplier['id']}",
            json={
                **supplier_payload,
                "name": "Acme Holdings",
                "category_ids": [second["id"], first["id"]],
                "gra_expiration_date": (TODAY + timedelta(days=15)).isoformat(),
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Acme Holdings"
        assert set(data["category_ids"]) == {first["id"], second["id"]}
        assert data["category_id"] == second["id"]
        assert data["gra_days_remaining"] == 15
        assert data["alert_level"] == "warning"

    async def test_get_unknown_supplier(self, client) -> None:
        resp = await client.get("/api/v1/suppliers/00000000-0000-0000-0000-000000000001")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Supplier not found"

    async def test_delete_removes_documents(self, client, supplier, upload_document) -> None:
        assert (await upload_document(supplier["id"], "tin_certificate")).status_code == 201

        resp = await client.delete(f"/api/v1/suppliers/{supplier['id']}")
        assert resp.status_code == 204
        assert (await client.get(f"/api/v1/suppliers/{supplier['id']}")).status_code == 404

        stats = (await client.get("/api/v1/statistics")).json()
        assert stats["total_documents"] == 0

    async def test_delete_with_contracts_refused(self, client, supplier) -> None:
        await client.post(
            "/api/v1/contracts",
            json={"contract_number": "C-001", "supplier_id": supplier["id"]},
        )
        resp = await client.delete(f"/api/v1/suppliers/{supplier['id']}")
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Cannot delete supplier with existing contracts"


class TestDocuments:
    """Compliance document endpoints."""

    async def test_upload_and_download(self, client, supplier, upload_document) -> None:
        resp = await upload_document(supplier["id"], "nis_compliance")
        assert resp.status_code == 201
        assert resp.json()["replaced"] is False
        assert resp.json()["file_size"] == len(PDF_BYTES)

        download = await client.get(f"/api/v1/suppliers/{supplier['id']}/documents/nis_compliance")
        assert download.status_code == 200
        assert download.content == PDF_BYTES
        assert download.headers["content-type"] == "application/pdf"
        assert download.headers["content-disposition"].startswith("inline")

        detail = (await client.get(f"/api/v1/suppliers/{supplier['id']}")).json()
        assert "nis_compliance" not in detail["missing_documents"]
        assert detail["documents"][0]["document_type"] == "nis_compliance"

    async def test_replace_keeps_one_document(self, client, supplier, upload_document) -> None:
        await upload_document(supplier["id"], "gra_compliance")
        second = await upload_document(supplier["id"], "gra_compliance", PDF_BYTES + b"v2")
        assert second.status_code == 201
        assert second.json()["replaced"] is True

        detail = (await client.get(f"/api/v1/suppliers/{supplier['id']}")).json()
        assert [d["document_type"] for d in detail["documents"]] == ["gra_compliance"]

        download = await client.get(f"/api/v1/suppliers/{supplier['id']}/documents/gra_compliance")
        assert download.content == PDF_BYTES + b"v2"

    async def test_all_documents_clear_action_needed(self, client, supplier, upload_document) -> None:
        for doc_type in ALL_TYPES:
            assert (await upload_document(supplier["id"], doc_type)).status_code == 201

        detail = (await client.get(f"/api/v1/suppliers/{supplier['id']}")).json()
        assert detail["missing_documents"] == []
        assert detail["alert_level"] is None
        assert detail["is_fully_compliant"] is True

    async def test_invalid_type(self, client, supplier, upload_document) -> None:
        resp = await upload_document(supplier["id"], "passport")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid document type"

        resp = await client.get(f"/api/v1/suppliers/{supplier['id']}/documents/passport")
        assert resp.status_code == 400

    async def test_non_pdf_rejected(self, client, supplier) -> None:
        resp = await client.post(
            f"/api/v1/suppliers/{supplier['id']}/documents",
            data={"document_type": "tin_certificate"},
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )
        assert resp.status_code == 400

        resp = await client.post(
            f"/api/v1/suppliers/{supplier['id']}/documents",
            data={"document_type": "tin_certificate"},
            files={"file": ("fake.pdf", b"MZ not a pdf", "application/pdf")},
        )
        assert resp.status_code == 400

    async def test_missing_document(self, client, supplier) -> None:
        resp = await client.get(f"/api/v1/suppliers/{supplier['id']}/documents/tin_certificate")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Document not found"

    async def test_unknown_supplier(self, upload_document) -> None:
        resp = await upload_document("00000000-0000-0000-0000-000000000001", "tin_certificate")
        assert resp.status_code == 404

    async def test_delete(self, client, supplier, upload_document) -> None:
        await upload_document(supplier["id"], "business_registration")

        resp = await client.delete(
            f"/api/v1/suppliers/{supplier['id']}/documents/business_registration"
        )
        assert resp.status_code == 204

        resp = await client.get(
            f"/api/v1/suppliers/{supplier['id']}/documents/business_registration"
        )
        assert resp.status_code == 404


class TestContracts:
    """Contract endpoints."""

    async def test_crud(self, client, supplier) -> None:
        resp = await client.post(
            "/api/v1/contracts",
            json={
                "contract_number": "C-100",
                "supplier_id": supplier["id"],
                "amount": "1500.50",
                "start_date": "2025-01-01",
                "end_date": "2025-12-31",
            },
        )
        assert resp.status_code == 201
        contract = resp.json()
        assert contract["supplier_name"] == "Acme Ltd."
        assert contract["files"] == []

        resp = await client.put(
            f"/api/v1/contracts/{contract['id']}", json={"description": "Stationery supply"}
        )
        assert resp.status_code == 200
        assert resp.json()["description"] == "Stationery supply"
        assert resp.json()["contract_number"] == "C-100"

        listed = (await client.get("/api/v1/contracts", params={"supplier_id": supplier["id"]})).json()
        assert listed["total"] == 1
        assert float(listed["total_amount"]) == 1500.50

        assert (await client.delete(f"/api/v1/contracts/{contract['id']}")).status_code == 204
        assert (await client.get(f"/api/v1/contracts/{contract['id']}")).status_code == 404

    async def test_duplicate_number(self, client, supplier) -> None:
        payload = {"contract_number": "C-1", "supplier_id": supplier["id"]}
        assert (await client.post("/api/v1/contracts", json=payload)).status_code == 201
        resp = await client.post("/api/v1/contracts", json=payload)
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Contract number already exists"

        # Case-sensitive
        lower = {**payload, "contract_number": "c-1"}
        assert (await client.post("/api/v1/contracts", json=lower)).status_code == 201

    async def test_end_before_start(self, client, supplier) -> None:
        resp = await client.post(
            "/api/v1/contracts",
            json={
                "contract_number": "C-2",
                "supplier_id": supplier["id"],
                "start_date": "2025-06-01",
                "end_date": "2025-05-01",
            },
        )
        assert resp.status_code == 422

    async def test_unknown_supplier(self, client) -> None:
        resp = await client.post(
            "/api/v1/contracts",
            json={"contract_number": "C-3", "supplier_id": "00000000-0000-0000-0000-000000000001"},
        )
        assert resp.status_code == 404

    async def test_files(self, client, supplier) -> None:
        contract = (
            await client.post(
                "/api/v1/contracts",
                json={"contract_number": "C-4", "supplier_id": supplier["id"]},
            )
        ).json()

        resp = await client.post(
            f"/api/v1/contracts/{contract['id']}/files",
            files={"file": ("signed.pdf", PDF_BYTES, "application/pdf")},
        )
        assert resp.status_code == 201
        file_id = resp.json()["id"]

        detail = (await client.get(f"/api/v1/contracts/{contract['id']}")).json()
        assert [f["file_name"] for f in detail["files"]] == ["signed.pdf"]

        download = await client.get(f"/api/v1/contracts/{contract['id']}/files/{file_id}")
        assert download.status_code == 200
        assert download.content == PDF_BYTES

        resp = await client.delete(f"/api/v1/contracts/{contract['id']}/files/{file_id}")
        assert resp.status_code == 204
        resp = await client.get(f"/api/v1/contracts/{contract['id']}/files/{file_id}")
        assert resp.status_code == 404

    async def test_totals(self, client, supplier, supplier_payload) -> None:
        other = (
            await client.post("/api/v1/suppliers", json={**supplier_payload, "name": "Beta Co"})
        ).json()
        for number, supplier_id, amount in [
            ("C-10", supplier["id"], "100.00"),
            ("C-11", supplier["id"], "50.25"),
            ("C-12", other["id"], "10.00"),
        ]:
            await client.post(
                "/api/v1/contracts",
                json={"contract_number": number, "supplier_id": supplier_id, "amount": amount},
            )

        totals = (await client.get("/api/v1/contracts/totals")).json()
        assert totals["count"] == 3
        assert float(totals["total_amount"]) == 160.25
        assert [t["supplier_name"] for t in totals["by_supplier"]] == ["Acme Ltd.", "Beta Co"]
        assert totals["by_supplier"][0]["count"] == 2


class TestAlertsAndStatistics:
    """Alerts summary and dashboard statistics."""

    async def _create(self, client, payload, name, docs, upload_document, nis=None, gra=None):
        body = {**payload, "name": name}
        if nis is not None:
            body["nis_expiration_date"] = (TODAY + timedelta(days=nis)).isoformat()
        if gra is not None:
            body["gra_expiration_date"] = (TODAY + timedelta(days=gra)).isoformat()
        supplier = (await client.post("/api/v1/suppliers", json=body)).json()
        for doc_type in docs:
            await upload_document(supplier["id"], doc_type)
        return supplier

    async def test_alerts_summary(self, client, supplier_payload, upload_document) -> None:
        await self._create(client, supplier_payload, "Alpha", ALL_TYPES, upload_document, nis=10)
        await self._create(client, supplier_payload, "Bravo", ALL_TYPES, upload_document, gra=-1)
        await self._create(client, supplier_payload, "Charlie", ALL_TYPES, upload_document, nis=20)
        await self._create(client, supplier_payload, "Delta", ALL_TYPES[:2], upload_document)
        await self._create(client, supplier_payload, "Echo", ALL_TYPES, upload_document, nis=90)

        resp = await client.get("/api/v1/alerts")
        assert resp.status_code == 200
        data = resp.json()

        assert [a["supplier_name"] for a in data["alerts"]] == ["Bravo", "Alpha", "Charlie", "Delta"]
        assert data["summary"] == {"critical": 1, "warning": 2, "action_needed": 1, "total": 4}
        assert data["badge_count"] == 4

        bravo = data["alerts"][0]
        assert bravo["alert_level"] == "critical"
        assert bravo["alerts"][0]["message"] == "GRA Compliance EXPIRED (1 day ago)"
        assert bravo["messages"] == ["• GRA Compliance EXPIRED (1 day ago)"]

    async def test_alerts_empty(self, client) -> None:
        data = (await client.get("/api/v1/alerts")).json()
        assert data["alerts"] == []
        assert data["summary"]["total"] == 0
        assert data["badge_count"] == 0

    async def test_statistics(self, client, supplier_payload, upload_document) -> None:
        await self._create(client, supplier_payload, "Alpha", ALL_TYPES, upload_document)
        await self._create(client, supplier_payload, "Bravo", ALL_TYPES, upload_document, nis=-3, gra=-3)
        await self._create(client, supplier_payload, "Charlie", [], upload_document, gra=0)

        stats = (await client.get("/api/v1/statistics")).json()
        assert stats["total_suppliers"] == 3
        assert stats["total_categories"] == 1
        assert stats["total_documents"] == 8
        assert stats["compliant_suppliers"] == 1
        assert stats["nis_expired"] == 1
        assert stats["gra_expired"] == 1
        assert stats["needs_attention"] == 2
        assert stats["total_contracts"] == 0
