"""Category API endpoints: flat CRUD plus the navigation tree"""

from typing import List

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.errors import ConflictError
from backoffice.models.menu import Category, MenuItem
from backoffice.models.user import User
from backoffice.schemas.menu import (
    CatalogEdit,
    CategoryCreate,
    CategoryEdit,
    CategoryResponse,
    CategoryTreeNode,
    CategoryUpdate,
    MenuItemEdit,
    MenuItemResponse,
)
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.category_tree import (
    CategoryNode,
    build_category_tree,
    category_path,
    check_parent_assignment,
)
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


async def _all_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category).order_by(Category.view_order, Category.id))
    return list(result.scalars().all())


def _to_tree(node: CategoryNode) -> CategoryTreeNode:
    data = CategoryResponse.model_validate(node.record).model_dump()
    return CategoryTreeNode(**data, children=[_to_tree(child) for child in node.children])


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List all categories, flat, by view order"""
    return await _all_categories(db)


@router.get("/tree", response_model=List[CategoryTreeNode])
async def get_category_tree(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Categories as a forest of root categories with nested children"""
    categories = await _all_categories(db)
    return [_to_tree(root) for root in build_category_tree(categories)]


@router.patch("/entries")
async def edit_catalog_entry(
    edit: CatalogEdit,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Apply the shared edit form to a category or a menu item"""
    changes = edit.model_dump(exclude_unset=True, exclude={"type", "id"})

    if isinstance(edit, CategoryEdit):
        category = await get_or_404(db, Category, edit.id, "Category")
        if "parent_id" in changes:
            check_parent_assignment(await _all_categories(db), category.id, changes["parent_id"])
        async with transaction(db, "Update category"):
            for field, value in changes.items():
                setattr(category, field, value)
        return CategoryResponse.model_validate(category)

    if isinstance(edit, MenuItemEdit):
        item = await get_or_404(db, MenuItem, edit.id, "Menu item")
        if changes.get("category_id") is not None:
            await get_or_404(db, Category, changes["category_id"], "Category")
        async with transaction(db, "Update menu item"):
            for field, value in changes.items():
                setattr(item, field, value)
        return MenuItemResponse.model_validate(item)

    raise TypeError(f"Unhandled catalog entry type: {type(edit).__name__}")


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a single category"""
    return await get_or_404(db, Category, category_id, "Category")


@router.get("/{category_id}/path", response_model=List[CategoryResponse])
async def get_category_path(
    category_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Breadcrumb from the root category down to this one"""
    return category_path(await _all_categories(db), category_id)


@router.get("/{category_id}/menu_items", response_model=List[MenuItemResponse])
async def list_category_menu_items(
    category_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Menu items filed directly under a category"""
    await get_or_404(db, Category, category_id, "Category")
    result = await db.execute(
        select(MenuItem)
        .where(MenuItem.category_id == category_id)
        .order_by(MenuItem.view_order, MenuItem.name)
    )
    return result.scalars().all()


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    category_data: CategoryCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Create a category, optionally under a parent"""
    check_parent_assignment(await _all_categories(db), None, category_data.parent_id)

    category = Category(**category_data.model_dump())
    async with transaction(db, "Create category"):
        db.add(category)

    logger.info("Category created", category_id=category.id, parent_id=category.parent_id)
    return category


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Update a category; a new parent must exist and must not be a descendant"""
    category = await get_or_404(db, Category, category_id, "Category")
    changes = category_data.model_dump(exclude_unset=True)

    if "parent_id" in changes:
        check_parent_assignment(await _all_categories(db), category_id, changes["parent_id"])

    async with transaction(db, "Update category"):
        for field, value in changes.items():
            setattr(category, field, value)

    return category


@router.delete("/{category_id}", status_code=204)
async def delete_category(
    category_id: int,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Delete a leaf category; its menu items are left without a category"""
    await get_or_404(db, Category, category_id, "Category")

    result = await db.execute(select(Category.id).where(Category.parent_id == category_id).limit(1))
    if result.scalar_one_or_none() is not None:
        raise ConflictError("Category has sub-categories; move or delete them first")

    async with transaction(db, "Delete category"):
        await db.execute(
            update(MenuItem).where(MenuItem.category_id == category_id).values(category_id=None)
        )
        category = await db.get(Category, category_id)
        await db.delete(category)

    logger.info("Category deleted", category_id=category_id)
