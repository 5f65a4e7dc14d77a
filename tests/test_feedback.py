"""Tests for order feedback and reward endpoints"""

import pytest
from httpx import AsyncClient

from backoffice.models.order import Order


@pytest.fixture
async def test_order(test_db):
    """Create a delivered order"""
    order = Order(
        phone_number="+15551234567",
        delivery_method="PICKUP",
        order_items=[{"name": "Margherita Pizza", "quantity": 1, "price_cents": 1499}],
        total_amount_cents=1724,
        status="DELIVERED",
    )
    test_db.add(order)
    await test_db.commit()
    return order


def feedback_payload(order, **overrides):
    payload = {
        "order_id": str(order.id),
        "user_id": "customer-1",
        "rating": 4,
        "food_quality_rating": 5,
        "comment": "Great crust",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_feedback(authenticated_client: AsyncClient, test_order):
    response = await authenticated_client.post("/order_feedback", json=feedback_payload(test_order))

    assert response.status_code == 201
    data = response.json()
    assert data["rating"] == 4
    assert data["status"] == "active"
    assert data["deleted_at"] is None


@pytest.mark.asyncio
async def test_feedback_requires_rating(authenticated_client: AsyncClient, test_order):
    payload = feedback_payload(test_order)
    del payload["rating"]

    response = await authenticated_client.post("/order_feedback", json=payload)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_feedback_rating_range(authenticated_client: AsyncClient, test_order):
    response = await authenticated_client.post("/order_feedback", json=feedback_payload(test_order, rating=6))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_duplicate_feedback_conflicts(authenticated_client: AsyncClient, test_order):
    first = await authenticated_client.post("/order_feedback", json=feedback_payload(test_order))
    second = await authenticated_client.post("/order_feedback", json=feedback_payload(test_order, rating=1))

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["detail"] == "Feedback already exists for this order and user"


@pytest.mark.asyncio
async def test_feedback_for_missing_order(authenticated_client: AsyncClient):
    response = await authenticated_client.post(
        "/order_feedback",
        json={"order_id": "00000000-0000-0000-0000-000000000000", "user_id": "c", "rating": 3},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_soft_delete_feedback(authenticated_client: AsyncClient, test_order):
    feedback_id = (await authenticated_client.post("/order_feedback", json=feedback_payload(test_order))).json()["id"]

    response = await authenticated_client.delete(f"/order_feedback/{feedback_id}")
    assert response.status_code == 204

    assert (await authenticated_client.get("/order_feedback")).json() == []

    deleted = await authenticated_client.get("/order_feedback", params={"status": "deleted"})
    assert len(deleted.json()) == 1
    assert deleted.json()[0]["deleted_at"] is not None

    # Still retrievable by id
    kept = await authenticated_client.get(f"/order_feedback/{feedback_id}")
    assert kept.json()["status"] == "deleted"


@pytest.mark.asyncio
async def test_update_feedback(authenticated_client: AsyncClient, test_order):
    feedback_id = (await authenticated_client.post("/order_feedback", json=feedback_payload(test_order))).json()["id"]

    response = await authenticated_client.put(
        f"/order_feedback/{feedback_id}",
        json={"status": "inactive", "comment": "Hidden"},
    )

    assert response.status_code == 200
    assert response.json()["status"] == "inactive"
    assert response.json()["comment"] == "Hidden"


@pytest.mark.asyncio
async def test_update_feedback_rejects_null_rating(authenticated_client: AsyncClient, test_order):
    feedback_id = (await authenticated_client.post("/order_feedback", json=feedback_payload(test_order))).json()["id"]

    response = await authenticated_client.put(f"/order_feedback/{feedback_id}", json={"rating": None})

    assert response.status_code == 400
    assert (await authenticated_client.get(f"/order_feedback/{feedback_id}")).json()["rating"] is not None


@pytest.mark.asyncio
async def test_reward_adjustments(authenticated_client: AsyncClient):
    created = await authenticated_client.post("/rewards", json={"user_id": "customer-1", "points": 50})
    assert created.status_code == 201
    reward_id = created.json()["id"]

    added = await authenticated_client.post(f"/rewards/{reward_id}/adjust", json={"points_change": 25})
    assert added.json()["points"] == 75

    removed = await authenticated_client.post(f"/rewards/{reward_id}/adjust", json={"points_change": -100})
    assert removed.status_code == 200
    assert removed.json()["points"] == 0


@pytest.mark.asyncio
async def test_duplicate_reward_balance(authenticated_client: AsyncClient):
    await authenticated_client.post("/rewards", json={"user_id": "customer-1"})

    response = await authenticated_client.post("/rewards", json={"user_id": "customer-1"})

    assert response.status_code == 409
