"""Tests for order endpoints, pricing and status transitions"""

from datetime import datetime

import pytest
from httpx import AsyncClient

from backoffice.errors import ValidationFailed
from backoffice.models.order import Order
from backoffice.services.orders import check_transition, compute_order_totals


def test_compute_totals_pickup():
    totals = compute_order_totals(
        [{"price_cents": 1000, "quantity": 2}, {"price_cents": 350, "quantity": 1}],
        "PICKUP",
        vat_rate=0.15,
        delivery_fee_cents=500,
    )

    assert totals == {
        "subtotal_cents": 2350,
        "delivery_amount_cents": 0,
        "vat_cents": 352,
        "total_amount_cents": 2702,
    }


def test_compute_totals_delivery_adds_fee():
    totals = compute_order_totals([{"price_cents": 1000, "quantity": 1}], "DELIVERY", vat_rate=0.1, delivery_fee_cents=500)

    assert totals["delivery_amount_cents"] == 500
    assert totals["total_amount_cents"] == 1600


def test_allowed_transitions():
    check_transition("ORDER_PLACED", "PREPARING")
    check_transition("READY_FOR_DELIVERY", "DELIVERED")
    check_transition("OUT_FOR_DELIVERY", "CANCELLED")
    check_transition(None, "PREPARING")


@pytest.mark.parametrize(
    "current, target",
    [
        ("ORDER_PLACED", "DELIVERED"),
        ("DELIVERED", "PREPARING"),
        ("CANCELLED", "ORDER_PLACED"),
        ("PREPARING", "NOT_A_STATUS"),
    ],
)
def test_rejected_transitions(current, target):
    with pytest.raises(ValidationFailed):
        check_transition(current, target)


async def _create_order(client, **overrides):
    payload = {
        "phone_number": "+15551234567",
        "order_items": [
            {"id": "1", "name": "Margherita Pizza", "quantity": 2, "price_cents": 1499},
        ],
        "payment_method": "CASH",
    }
    payload.update(overrides)
    return await client.post("/orders", json=payload)


@pytest.mark.asyncio
async def test_create_order(authenticated_client: AsyncClient):
    response = await _create_order(authenticated_client, delivery_method="DELIVERY", delivery_address="1 Main St")

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "ORDER_PLACED"
    assert data["payment_status"] == "PENDING"
    assert data["delivery_method"] == "DELIVERY"
    assert data["delivery_amount_cents"] == 500
    assert data["vat_cents"] == 450
    assert data["total_amount_cents"] == 2998 + 500 + 450
    assert data["currency"] == "USD"
    assert data["order_items"][0]["name"] == "Margherita Pizza"


@pytest.mark.asyncio
async def test_create_order_requires_items(authenticated_client: AsyncClient):
    response = await _create_order(authenticated_client, order_items=[])

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_order_status_flow(authenticated_client: AsyncClient):
    order_id = (await _create_order(authenticated_client)).json()["id"]

    for status in ("PREPARING", "READY_FOR_DELIVERY", "OUT_FOR_DELIVERY", "DELIVERED"):
        response = await authenticated_client.patch(f"/orders/{order_id}/status", json={"status": status})
        assert response.status_code == 200
        assert response.json()["status"] == status

    response = await authenticated_client.patch(f"/orders/{order_id}/status", json={"status": "CANCELLED"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_illegal_status_jump(authenticated_client: AsyncClient):
    order_id = (await _create_order(authenticated_client)).json()["id"]

    response = await authenticated_client.patch(f"/orders/{order_id}/status", json={"status": "DELIVERED"})

    assert response.status_code == 400
    assert "Cannot move order" in response.json()["detail"]


@pytest.mark.asyncio
async def test_mark_order_paid(authenticated_client: AsyncClient):
    order_id = (await _create_order(authenticated_client)).json()["id"]

    response = await authenticated_client.put(
        f"/orders/{order_id}",
        json={"payment_status": "PAID", "transaction_id": "txn_123"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["payment_status"] == "PAID"
    assert data["payment_confirmed_at"] is not None


@pytest.mark.asyncio
async def test_list_orders_paginated(authenticated_client: AsyncClient):
    for i in range(3):
        await _create_order(authenticated_client, phone_number=f"+1555000000{i}")

    response = await authenticated_client.get("/orders", params={"page": 2, "page_size": 2})

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["total_pages"] == 2
    assert data["page"] == 2
    assert len(data["items"]) == 1


@pytest.mark.asyncio
async def test_list_orders_date_bounds_are_whole_days(authenticated_client: AsyncClient, test_db):
    for phone, created_at in [
        ("+15550000001", datetime(2024, 3, 9, 23, 30)),
        ("+15550000002", datetime(2024, 3, 10, 8, 0)),
        ("+15550000003", datetime(2024, 3, 10, 21, 45)),
        ("+15550000004", datetime(2024, 3, 11, 0, 0)),
    ]:
        test_db.add(Order(
            phone_number=phone,
            order_items=[{"name": "Lemonade", "quantity": 1, "price_cents": 399}],
            total_amount_cents=399,
            created_at=created_at,
        ))
    await test_db.commit()

    response = await authenticated_client.get(
        "/orders",
        params={"from_date": "2024-03-10", "to_date": "2024-03-10"},
    )

    assert response.status_code == 200
    assert sorted(order["phone_number"] for order in response.json()["items"]) == [
        "+15550000002",
        "+15550000003",
    ]


@pytest.mark.asyncio
async def test_order_report_and_summary(authenticated_client: AsyncClient):
    await _create_order(authenticated_client)
    await _create_order(
        authenticated_client,
        order_items=[{"name": "Lemonade", "quantity": 1, "price_cents": 399}],
    )

    report = await authenticated_client.get(
        "/reports/orders",
        params={"item": "lemon", "sort_by": "total_amount_cents", "sort_dir": "asc"},
    )
    assert report.status_code == 200
    assert report.json()["total"] == 1
    assert report.json()["items"][0]["order_items"][0]["name"] == "Lemonade"

    summary = await authenticated_client.get("/reports/orders/summary")
    assert summary.status_code == 200
    assert summary.json()["total_orders"] == 2
    assert summary.json()["pending_orders"] == 2


@pytest.mark.asyncio
async def test_order_report_rejects_unknown_sort(authenticated_client: AsyncClient):
    response = await authenticated_client.get("/reports/orders", params={"sort_by": "hashed_password"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_missing_order(authenticated_client: AsyncClient):
    response = await authenticated_client.get("/orders/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404
    assert response.json()["detail"] == "Order not found"
