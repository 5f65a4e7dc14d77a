#!/usr/bin/env python3
"""
Seed script to create demo back-office users and a nested menu catalog
"""

import asyncio

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# (name, parent name, view order)
CATEGORIES = [
    ("Starters", None, 1),
    ("Mains", None, 2),
    ("Pizza", "Mains", 1),
    ("Pasta", "Mains", 2),
    ("Desserts", None, 3),
    ("Drinks", None, 4),
    ("Hot Drinks", "Drinks", 1),
    ("Cold Drinks", "Drinks", 2),
]

MENU_ITEMS = [
    {"name": "Bruschetta", "description": "Grilled bread, tomatoes, garlic and basil", "price_cents": 899, "category": "Starters"},
    {"name": "Garlic Bread", "description": "Toasted bread with garlic butter", "price_cents": 599, "category": "Starters"},
    {"name": "Margherita Pizza", "description": "Mozzarella, tomato sauce and basil", "price_cents": 1499, "category": "Pizza", "is_popular": 1},
    {"name": "Pepperoni Pizza", "description": "Pepperoni with mozzarella", "price_cents": 1699, "category": "Pizza", "is_popular": 1},
    {"name": "Vegetable Pizza", "description": "Peppers, onions, mushrooms and olives", "price_cents": 1699, "category": "Pizza", "is_popular": 0},
    {"name": "Spaghetti Bolognese", "description": "Spaghetti with rich meat sauce", "price_cents": 1599, "category": "Pasta"},
    {"name": "Fettuccine Alfredo", "description": "Fettuccine in creamy parmesan sauce", "price_cents": 1499, "category": "Pasta"},
    {"name": "Tiramisu", "description": "Coffee-soaked ladyfingers and mascarpone", "price_cents": 899, "category": "Desserts"},
    {"name": "Espresso", "description": "Single or double shot", "price_cents": 349, "category": "Hot Drinks"},
    {"name": "Italian Soda", "description": "Sparkling water with a flavor of your choice", "price_cents": 399, "category": "Cold Drinks"},
]

ADDONS = [
    ("Extra Cheese", 150),
    ("Jalapenos", 100),
    ("Olives", 120),
    ("Parmesan", 80),
]

OPTION_GROUPS = {
    "Size": [("Small (10\")", -200), ("Medium (14\")", 0), ("Large (18\")", 300)],
    "Crust": [("Regular", 0), ("Thin", 0), ("Gluten-Free", 300)],
}


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from backoffice.database import SessionLocal, engine, Base
    from backoffice.models.menu import (
        Addon,
        Category,
        MenuItem,
        MenuItemAddon,
        MenuItemOptionGroup,
        MenuOption,
        OptionGroup,
        OptionGroupOption,
    )
    from backoffice.models.user import User, UserRole

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        result = await db.execute(select(User).where(User.email == "admin@backoffice.local"))
        if result.scalar_one_or_none():
            print("Demo data already exists. Skipping...")
            return

        print("Creating users...")

        db.add_all([
            User(
                email="admin@backoffice.local",
                hashed_password=pwd_context.hash("admin123"),
                full_name="System Admin",
                role=UserRole.ADMIN,
            ),
            User(
                email="manager@backoffice.local",
                hashed_password=pwd_context.hash("manager123"),
                full_name="Floor Manager",
                role=UserRole.MANAGER,
            ),
            User(
                email="staff@backoffice.local",
                hashed_password=pwd_context.hash("staff123"),
                full_name="Front Desk",
                role=UserRole.STAFF_VIEWER,
            ),
        ])

        print("Creating categories...")

        categories = {}
        for name, parent, view_order in CATEGORIES:
            category = Category(
                name=name,
                parent_id=categories[parent].id if parent else None,
                view_order=view_order,
            )
            db.add(category)
            await db.flush()
            categories[name] = category

        print("Creating menu items...")

        items = []
        for item_data in MENU_ITEMS:
            item = MenuItem(
                name=item_data["name"],
                description=item_data["description"],
                price_cents=item_data["price_cents"],
                category_id=categories[item_data["category"]].id,
                is_popular=item_data.get("is_popular"),
            )
            db.add(item)
            items.append(item)

        addons = [Addon(name=name, price_cents=price) for name, price in ADDONS]
        db.add_all(addons)

        groups = {}
        for group_name, options in OPTION_GROUPS.items():
            group = OptionGroup(name=group_name)
            db.add(group)
            groups[group_name] = group
            for option_name, adjustment in options:
                option = MenuOption(name=option_name, price_adjustment_cents=adjustment)
                db.add(option)
                await db.flush()
                db.add(OptionGroupOption(option_group_id=group.id, option_id=option.id))

        await db.flush()

        # Pizzas get size, crust and topping addons
        for item in items:
            if item.category_id != categories["Pizza"].id:
                continue
            for group in groups.values():
                db.add(MenuItemOptionGroup(menu_item_id=item.id, option_group_id=group.id))
            for addon in addons[:3]:
                db.add(MenuItemAddon(
                    menu_item_id=item.id,
                    addon_id=addon.id,
                    is_default=addon.name == "Extra Cheese",
                    max_quantity=2,
                ))

        await db.commit()

        print(f"""
Demo data created successfully!

Users:
  Admin:    admin@backoffice.local / admin123
  Manager:  manager@backoffice.local / manager123
  Staff:    staff@backoffice.local / staff123

Catalog: {len(CATEGORIES)} categories, {len(MENU_ITEMS)} items,
         {len(ADDONS)} addons, {len(OPTION_GROUPS)} option groups
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
