"""Tests for category and menu item endpoints"""

import pytest
from httpx import AsyncClient

from backoffice.api.auth import create_access_token


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.mark.asyncio
async def test_category_tree(authenticated_client: AsyncClient, test_categories):
    """Roots and children come back ordered by view_order"""
    response = await authenticated_client.get("/categories/tree")

    assert response.status_code == 200
    tree = response.json()
    assert [node["name"] for node in tree] == ["Mains", "Drinks"]
    assert [child["name"] for child in tree[0]["children"]] == ["Pizza", "Pasta"]
    assert tree[1]["children"] == []


@pytest.mark.asyncio
async def test_category_path(authenticated_client: AsyncClient, test_categories):
    pizza_id = test_categories["pizza"].id

    response = await authenticated_client.get(f"/categories/{pizza_id}/path")

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Mains", "Pizza"]


@pytest.mark.asyncio
async def test_create_category_under_parent(authenticated_client: AsyncClient, test_categories):
    drinks_id = test_categories["drinks"].id

    response = await authenticated_client.post(
        "/categories",
        json={"name": "Hot Drinks", "parent_id": drinks_id, "view_order": 1},
    )

    assert response.status_code == 201
    assert response.json()["parent_id"] == drinks_id

    tree = (await authenticated_client.get("/categories/tree")).json()
    assert [child["name"] for child in tree[1]["children"]] == ["Hot Drinks"]


@pytest.mark.asyncio
async def test_create_category_missing_parent(authenticated_client: AsyncClient, test_categories):
    response = await authenticated_client.post(
        "/categories",
        json={"name": "Orphan", "parent_id": 999},
    )

    assert response.status_code == 400
    assert "does not exist" in response.json()["detail"]


@pytest.mark.asyncio
async def test_update_category_rejects_cycle(authenticated_client: AsyncClient, test_categories):
    mains_id = test_categories["mains"].id
    pizza_id = test_categories["pizza"].id

    response = await authenticated_client.put(
        f"/categories/{mains_id}",
        json={"parent_id": pizza_id},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_category_with_children_is_blocked(authenticated_client: AsyncClient, test_categories):
    mains_id = test_categories["mains"].id

    response = await authenticated_client.delete(f"/categories/{mains_id}")

    assert response.status_code == 409
    assert (await authenticated_client.get(f"/categories/{mains_id}")).status_code == 200


@pytest.mark.asyncio
async def test_delete_leaf_category_detaches_items(authenticated_client: AsyncClient, test_menu_items, test_categories):
    pizza_id = test_categories["pizza"].id
    item_id = test_menu_items[0].id

    response = await authenticated_client.delete(f"/categories/{pizza_id}")

    assert response.status_code == 204
    assert (await authenticated_client.get(f"/categories/{pizza_id}")).status_code == 404

    item = (await authenticated_client.get(f"/menu_items/{item_id}")).json()
    assert item["category_id"] is None


@pytest.mark.asyncio
async def test_category_menu_items(authenticated_client: AsyncClient, test_menu_items, test_categories):
    pizza_id = test_categories["pizza"].id

    response = await authenticated_client.get(f"/categories/{pizza_id}/menu_items")

    assert response.status_code == 200
    assert {item["name"] for item in response.json()} == {"Margherita Pizza", "Pepperoni Pizza"}


@pytest.mark.asyncio
async def test_edit_category_entry(authenticated_client: AsyncClient, test_categories):
    pasta_id = test_categories["pasta"].id

    response = await authenticated_client.patch(
        "/categories/entries",
        json={"type": "category", "id": pasta_id, "name": "Fresh Pasta"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Fresh Pasta"
    assert data["parent_id"] == test_categories["mains"].id


@pytest.mark.asyncio
async def test_edit_menu_item_entry(authenticated_client: AsyncClient, test_menu_items):
    item_id = test_menu_items[2].id

    response = await authenticated_client.patch(
        "/categories/entries",
        json={"type": "menu_item", "id": item_id, "price_cents": 449},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["price_cents"] == 449
    assert data["name"] == "Lemonade"


@pytest.mark.asyncio
async def test_edit_entry_unknown_type(authenticated_client: AsyncClient, test_categories):
    response = await authenticated_client.patch(
        "/categories/entries",
        json={"type": "addon", "id": 1, "name": "Nope"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_menu_items_filter_popular(authenticated_client: AsyncClient, test_menu_items):
    response = await authenticated_client.get("/menu_items", params={"is_popular": 1})

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Margherita Pizza"]


@pytest.mark.asyncio
async def test_is_popular_keeps_unset_state(authenticated_client: AsyncClient, test_menu_items):
    response = await authenticated_client.get(f"/menu_items/{test_menu_items[2].id}")

    assert response.json()["is_popular"] is None


@pytest.mark.asyncio
async def test_search_menu(authenticated_client: AsyncClient, test_menu_items):
    response = await authenticated_client.get("/menu_items/search", params={"query": "pizza"})

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert all("Pizza" in item["name"] for item in data["items"])


@pytest.mark.asyncio
async def test_update_menu_item_rejects_null_name(authenticated_client: AsyncClient, test_menu_items):
    item_id = test_menu_items[0].id

    response = await authenticated_client.put(f"/menu_items/{item_id}", json={"name": None})

    assert response.status_code == 400
    assert (await authenticated_client.get(f"/menu_items/{item_id}")).json()["name"] == "Margherita Pizza"


@pytest.mark.asyncio
async def test_update_menu_item_omitted_fields_unchanged(authenticated_client: AsyncClient, test_menu_items):
    item_id = test_menu_items[0].id

    response = await authenticated_client.put(f"/menu_items/{item_id}", json={"description": None})

    assert response.status_code == 200
    assert response.json()["description"] is None
    assert response.json()["name"] == "Margherita Pizza"


@pytest.mark.asyncio
async def test_update_addon_rejects_null_price(authenticated_client: AsyncClient, test_addons):
    response = await authenticated_client.put(f"/addons/{test_addons[0].id}", json={"price_cents": None})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_menu_item_unknown_category(authenticated_client: AsyncClient):
    response = await authenticated_client.post(
        "/menu_items",
        json={"name": "Ghost", "price_cents": 100, "category_id": 404},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_requires_authentication(client: AsyncClient, test_categories):
    response = await client.get("/categories/tree")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_viewer_can_read_but_not_write(viewer_client: AsyncClient, test_categories):
    assert (await viewer_client.get("/categories")).status_code == 200

    response = await viewer_client.post("/categories", json={"name": "Desserts"})

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_user_admin_only(client: AsyncClient, test_admin, test_manager):
    payload = {
        "email": "new@example.com",
        "password": "secret123",
        "full_name": "New Staff",
        "role": "staff_viewer",
    }

    forbidden = await client.post("/auth/users", json=payload, headers=auth_headers(test_manager))
    assert forbidden.status_code == 403

    created = await client.post("/auth/users", json=payload, headers=auth_headers(test_admin))
    assert created.status_code == 201
    assert created.json()["role"] == "staff_viewer"

    duplicate = await client.post("/auth/users", json=payload, headers=auth_headers(test_admin))
    assert duplicate.status_code == 409


@pytest.mark.asyncio
async def test_login(client: AsyncClient, test_manager):
    response = await client.post(
        "/auth/login",
        data={"username": "manager@example.com", "password": "testpass123"},
    )

    assert response.status_code == 200
    token = response.json()["access_token"]

    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["email"] == "manager@example.com"
