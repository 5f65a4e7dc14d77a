"""Test configuration and fixtures"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from uuid import uuid4

from backoffice.main import app
from backoffice.database import Base, get_db
from backoffice.models.user import User, UserRole
from backoffice.models.menu import Addon, Category, MenuItem, MenuOption, OptionGroup
from backoffice.api.auth import create_access_token, get_password_hash


@pytest.fixture
async def session_factory(tmp_path):
    """Fresh SQLite database per test"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def test_db(session_factory):
    """Session used by fixtures and assertions"""
    async with session_factory() as session:
        yield session


async def _create_user(db, email, role):
    user = User(
        id=uuid4(),
        email=email,
        hashed_password=get_password_hash("testpass123"),
        full_name=email.split("@")[0].title(),
        role=role,
        is_active=True,
    )
    db.add(user)
    await db.commit()
    return user


@pytest.fixture
async def test_admin(test_db):
    """Create an admin user"""
    return await _create_user(test_db, "admin@example.com", UserRole.ADMIN)


@pytest.fixture
async def test_manager(test_db):
    """Create a manager user"""
    return await _create_user(test_db, "manager@example.com", UserRole.MANAGER)


@pytest.fixture
async def test_viewer(test_db):
    """Create a read-only staff user"""
    return await _create_user(test_db, "viewer@example.com", UserRole.STAFF_VIEWER)


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
async def client(session_factory):
    """Test client; every request gets its own session, as in production"""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def authenticated_client(client, test_manager):
    """Client acting as a manager"""
    client.headers.update(auth_headers(test_manager))
    return client


@pytest.fixture
async def viewer_client(client, test_viewer):
    """Client acting as a read-only staff user"""
    client.headers.update(auth_headers(test_viewer))
    return client


@pytest.fixture
async def admin_client(client, test_admin):
    """Client acting as an admin"""
    client.headers.update(auth_headers(test_admin))
    return client


@pytest.fixture
async def test_categories(test_db):
    """Mains (with Pizza and Pasta below it) and Drinks"""
    mains = Category(name="Mains", view_order=1)
    drinks = Category(name="Drinks", view_order=2)
    test_db.add_all([mains, drinks])
    await test_db.flush()

    pasta = Category(name="Pasta", parent_id=mains.id, view_order=2)
    pizza = Category(name="Pizza", parent_id=mains.id, view_order=1)
    test_db.add_all([pasta, pizza])
    await test_db.commit()

    return {"mains": mains, "drinks": drinks, "pizza": pizza, "pasta": pasta}


@pytest.fixture
async def test_menu_items(test_db, test_categories):
    """Create test menu items"""
    items = [
        MenuItem(
            name="Margherita Pizza",
            description="Classic tomato and mozzarella",
            price_cents=1499,
            category_id=test_categories["pizza"].id,
            is_popular=1,
        ),
        MenuItem(
            name="Pepperoni Pizza",
            description="Pepperoni with mozzarella",
            price_cents=1699,
            category_id=test_categories["pizza"].id,
            is_popular=0,
        ),
        MenuItem(
            name="Lemonade",
            description="Fresh squeezed",
            price_cents=399,
            category_id=test_categories["drinks"].id,
        ),
    ]

    test_db.add_all(items)
    await test_db.commit()
    return items


@pytest.fixture
async def test_addons(test_db):
    """Create test addons"""
    addons = [
        Addon(name="Extra Cheese", price_cents=150),
        Addon(name="Jalapenos", price_cents=100),
        Addon(name="Olives", price_cents=120),
    ]
    test_db.add_all(addons)
    await test_db.commit()
    return addons


@pytest.fixture
async def test_option_groups(test_db):
    """Size and Crust groups plus a few options"""
    groups = [
        OptionGroup(name="Crust"),
        OptionGroup(name="Size"),
    ]
    options = [
        MenuOption(name="Large", price_adjustment_cents=300),
        MenuOption(name="Small", price_adjustment_cents=-200),
        MenuOption(name="Thin", price_adjustment_cents=0),
    ]
    test_db.add_all(groups + options)
    await test_db.commit()
    return {"groups": groups, "options": options}
