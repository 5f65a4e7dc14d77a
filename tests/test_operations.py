"""Tests for drivers, deliveries, invoices and payments"""

import pytest
from httpx import AsyncClient

from backoffice.models.order import Order


@pytest.fixture
async def test_order(test_db):
    order = Order(
        phone_number="+15551234567",
        delivery_method="DELIVERY",
        delivery_address="1 Main St",
        order_items=[{"name": "Pepperoni Pizza", "quantity": 1, "price_cents": 1699}],
        total_amount_cents=2454,
        status="READY_FOR_DELIVERY",
    )
    test_db.add(order)
    await test_db.commit()
    return order


async def _create_driver(client):
    response = await client.post(
        "/drivers",
        json={"name": "Dana Driver", "phone": "+15557654321", "vehicle_type": "scooter"},
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.asyncio
async def test_delivery_lifecycle(authenticated_client: AsyncClient, test_order):
    driver_id = await _create_driver(authenticated_client)

    created = await authenticated_client.post(
        "/deliveries",
        json={"order_id": str(test_order.id), "driver_id": driver_id, "customer_lat": 24.7, "customer_lng": 46.7},
    )
    assert created.status_code == 201
    delivery_id = created.json()["id"]
    assert created.json()["status"] == "pending"

    moved = await authenticated_client.put(
        f"/deliveries/{delivery_id}",
        json={"driver_lat": 24.71, "driver_lng": 46.69},
    )
    assert moved.json()["driver_lat"] == 24.71

    status = await authenticated_client.patch(f"/deliveries/{delivery_id}/status", json={"status": "delivered"})
    assert status.json()["status"] == "delivered"

    stats = (await authenticated_client.get("/deliveries/stats")).json()
    assert stats["total"] == 1
    assert stats["delivered"] == 1
    assert stats["pending"] == 0


@pytest.mark.asyncio
async def test_delivery_unknown_status(authenticated_client: AsyncClient, test_order):
    created = await authenticated_client.post("/deliveries", json={"order_id": str(test_order.id)})

    response = await authenticated_client.patch(
        f"/deliveries/{created.json()['id']}/status",
        json={"status": "teleported"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delivery_requires_existing_order(authenticated_client: AsyncClient):
    response = await authenticated_client.post(
        "/deliveries",
        json={"order_id": "00000000-0000-0000-0000-000000000000"},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_driver_crud(authenticated_client: AsyncClient):
    driver_id = await _create_driver(authenticated_client)

    updated = await authenticated_client.put(f"/drivers/{driver_id}", json={"is_active": False})
    assert updated.json()["is_active"] is False

    active = await authenticated_client.get("/drivers", params={"is_active": True})
    assert active.json() == []

    assert (await authenticated_client.delete(f"/drivers/{driver_id}")).status_code == 204
    assert (await authenticated_client.get(f"/drivers/{driver_id}")).status_code == 404


async def _create_invoice(client, number="INV-001", **overrides):
    payload = {
        "invoice_number": number,
        "customer_name": "Table Five",
        "table_number": 5,
        "items": [
            {"description": "Margherita Pizza", "quantity": 2, "unit_price_cents": 1000},
            {"description": "Lemonade", "quantity": 1, "unit_price_cents": 400},
        ],
        "tip_amount_cents": 200,
        "discount_amount_cents": 100,
    }
    payload.update(overrides)
    return await client.post("/invoices", json=payload)


@pytest.mark.asyncio
async def test_create_invoice_computes_amounts(authenticated_client: AsyncClient):
    response = await _create_invoice(authenticated_client)

    assert response.status_code == 201
    data = response.json()
    assert data["subtotal_cents"] == 2400
    assert data["tax_amount_cents"] == 360
    assert data["total_amount_cents"] == 2400 + 360 + 200 - 100
    assert data["status"] == "draft"
    assert [item["total_price_cents"] for item in data["items"]] == [2000, 400]


@pytest.mark.asyncio
async def test_duplicate_invoice_number(authenticated_client: AsyncClient):
    await _create_invoice(authenticated_client)

    response = await _create_invoice(authenticated_client)

    assert response.status_code == 409
    assert response.json()["detail"] == "Invoice number already exists"


@pytest.mark.asyncio
async def test_invoice_search_and_delete(authenticated_client: AsyncClient):
    first_id = (await _create_invoice(authenticated_client, "INV-001")).json()["id"]
    await _create_invoice(authenticated_client, "INV-002", customer_name="Patio")

    found = await authenticated_client.get("/invoices", params={"search": "patio"})
    assert found.json()["total"] == 1
    assert found.json()["items"][0]["invoice_number"] == "INV-002"

    assert (await authenticated_client.delete(f"/invoices/{first_id}")).status_code == 204
    assert (await authenticated_client.get(f"/invoices/{first_id}")).status_code == 404
    assert (await authenticated_client.get("/invoices")).json()["total"] == 1


@pytest.mark.asyncio
async def test_payments_and_stats(authenticated_client: AsyncClient):
    invoice_id = (await _create_invoice(authenticated_client)).json()["id"]

    paid = await authenticated_client.post(
        "/payments",
        json={
            "payment_number": "PAY-001",
            "invoice_id": invoice_id,
            "customer_id": "customer-1",
            "amount_paid_cents": 2860,
            "payment_method": "CREDIT_CARD",
            "payment_status": "PAID",
        },
    )
    assert paid.status_code == 201
    assert paid.json()["payment_date"] is not None

    pending = await authenticated_client.post(
        "/payments",
        json={"payment_number": "PAY-002", "amount_paid_cents": 500, "payment_method": "CASH"},
    )
    assert pending.json()["payment_status"] == "PENDING"

    stats = (await authenticated_client.get("/payments/stats")).json()
    assert stats == {
        "total_payments": 2,
        "completed_amount_cents": 2860,
        "pending_amount_cents": 500,
    }

    by_customer = await authenticated_client.get("/payments", params={"customer_id": "customer-1"})
    assert by_customer.json()["total"] == 1


@pytest.mark.asyncio
async def test_payment_for_missing_invoice(authenticated_client: AsyncClient):
    response = await authenticated_client.post(
        "/payments",
        json={
            "payment_number": "PAY-404",
            "invoice_id": "00000000-0000-0000-0000-000000000000",
            "amount_paid_cents": 100,
            "payment_method": "CASH",
        },
    )

    assert response.status_code == 404
