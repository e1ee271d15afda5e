"""Invoice & Auth Routes — verifies the HTTP translation of action results.

Invariants:
    - Successful create/update → 303 to /dashboard/invoices
    - Validation failure → 422 with field errors, nothing written
    - Delete → 204, list view re-rendered on next GET
    - DatabaseError → 503 with the user-facing message only, logged with its action
    - Render overlapping a revalidation is not cached
    - Failed login → 401 {"message": "Invalid credentials."}

Design Decisions:
    - Assertions read columns (not ORM objects) so the test session's identity
      map cannot serve stale rows written through the client's session
"""

import json
import logging
from datetime import date
from unittest.mock import AsyncMock

from fastapi import Request
from sqlalchemy import select

from invoicing.api.dependencies import get_invoice_store
from invoicing.api.error_handlers import unhandled_error_handler
from invoicing.core.domain_types import InvoiceStatus
from invoicing.core.errors import DatabaseError
from invoicing.infrastructure.invoice_store import SqlInvoiceStore
from invoicing.main import app
from invoicing.models.invoice import Invoice


async def test_create_redirects_to_list_and_persists(client, seed_customer, test_db, view_cache):
    res = await client.post(
        "/dashboard/invoices",
        data={"customerId": str(seed_customer.id), "amount": "50", "status": "pending"},
    )

    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard/invoices"
    amounts = (await test_db.execute(select(Invoice.amount))).scalars().all()
    assert amounts == [5000]
    assert view_cache.is_stale("/dashboard/invoices")


async def test_create_with_invalid_fields_returns_422(client, test_db):
    res = await client.post(
        "/dashboard/invoices", data={"amount": "0", "status": "overdue"},
    )

    assert res.status_code == 422
    body = res.json()
    assert body["message"] == "Missing Fields. Failed to Create Invoice."
    assert body["errors"] == {
        "customerId": ["Please select a customer."],
        "amount": ["Amount must be greater than 0"],
        "status": ["Please select a valid status."],
    }
    assert (await test_db.execute(select(Invoice.id))).all() == []


async def test_update_redirects_and_changes_row(client, seed_customer, test_db):
    invoice_id = await SqlInvoiceStore(test_db).insert(
        str(seed_customer.id), 100, InvoiceStatus.PENDING, date(2026, 1, 1),
    )

    res = await client.post(
        f"/dashboard/invoices/{invoice_id}/edit",
        data={"customerId": str(seed_customer.id), "amount": "19.99", "status": "paid"},
    )

    assert res.status_code == 303
    row = (await test_db.execute(
        select(Invoice.amount, Invoice.status).where(Invoice.id == invoice_id),
    )).one()
    assert row == (1999, "paid")


async def test_update_unknown_invoice_returns_404(client, seed_customer):
    res = await client.post(
        "/dashboard/invoices/00000000-0000-0000-0000-000000000000/edit",
        data={"customerId": str(seed_customer.id), "amount": "1", "status": "paid"},
    )
    assert res.status_code == 404


async def test_delete_returns_204_and_list_rerenders(client, seed_customer, test_db):
    invoice_id = await SqlInvoiceStore(test_db).insert(
        str(seed_customer.id), 100, InvoiceStatus.PENDING, date(2026, 1, 1),
    )
    listed = await client.get("/dashboard/invoices")
    assert len(listed.json()["invoices"]) == 1

    res = await client.post(f"/dashboard/invoices/{invoice_id}/delete")

    assert res.status_code == 204
    listed = await client.get("/dashboard/invoices")
    assert listed.json()["invoices"] == []


async def test_delete_unknown_invoice_is_noop(client):
    res = await client.post("/dashboard/invoices/not-a-real-id/delete")
    assert res.status_code == 204


async def test_list_view_is_served_from_cache_until_revalidated(client, seed_customer, test_db):
    first = await client.get("/dashboard/invoices")
    assert first.json()["invoices"] == []

    await SqlInvoiceStore(test_db).insert(
        str(seed_customer.id), 100, InvoiceStatus.PENDING, date(2026, 1, 1),
    )
    cached = await client.get("/dashboard/invoices")
    assert cached.json()["invoices"] == []


async def test_list_render_overlapping_a_write_is_not_cached(client, view_cache):
    async def list_while_writing():
        view_cache.revalidate_path("/dashboard/invoices")
        return []

    store = AsyncMock()
    store.list_invoices = AsyncMock(side_effect=list_while_writing)
    app.dependency_overrides[get_invoice_store] = lambda: store

    res = await client.get("/dashboard/invoices")

    assert res.json() == {"invoices": []}
    assert view_cache.get("/dashboard/invoices") is None
    assert view_cache.is_stale("/dashboard/invoices")


async def test_database_error_returns_503_with_user_message(client):
    failing_store = AsyncMock()
    failing_store.insert = AsyncMock(
        side_effect=DatabaseError("Connection or operational error", "insert"),
    )
    app.dependency_overrides[get_invoice_store] = lambda: failing_store

    res = await client.post(
        "/dashboard/invoices",
        data={"customerId": "c1", "amount": "50", "status": "pending"},
    )

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["message"] == "Database error occurred while creating the invoice."


async def test_domain_error_is_logged_with_action_context(client, caplog):
    failing_store = AsyncMock()
    failing_store.update = AsyncMock(
        side_effect=DatabaseError("Integrity constraint violated", "update"),
    )
    app.dependency_overrides[get_invoice_store] = lambda: failing_store

    res = await client.post(
        "/dashboard/invoices/inv-1/edit",
        data={"customerId": "c1", "amount": "5", "status": "paid"},
    )

    assert res.status_code == 503
    assert "Integrity" not in res.text
    [record] = [r for r in caplog.records if r.name == "invoicing.api.error_handlers"]
    assert record.levelno == logging.CRITICAL
    assert record.action == "update_invoice"
    assert record.invoice_id == "inv-1"
    assert record.error_code == "DATABASE_ERROR"


async def test_unhandled_error_body_is_generic():
    request = Request({
        "type": "http", "method": "POST", "path": "/dashboard/invoices",
        "headers": [], "query_string": b"",
    })

    res = await unhandled_error_handler(request, RuntimeError("pool exhausted"))

    assert res.status_code == 500
    body = json.loads(res.body)
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "pool exhausted" not in res.body.decode()


async def test_login_with_wrong_password_returns_401(client, seed_user):
    res = await client.post(
        "/login", data={"email": seed_user.email, "password": "wrong-password"},
    )
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid credentials."}


async def test_login_success_redirects(client, seed_user):
    res = await client.post(
        "/login",
        data={
            "email": seed_user.email, "password": "123456",
            "redirectTo": "/dashboard/invoices",
        },
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/dashboard/invoices"


async def test_health_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "Invoicing API"


async def test_readiness_without_database_returns_503(client, monkeypatch):
    monkeypatch.setattr("invoicing.infrastructure.database.db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
