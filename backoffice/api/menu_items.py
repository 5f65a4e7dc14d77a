"""Menu item API endpoints, including addon and option group links"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.errors import NotFoundError
from backoffice.models.menu import Category, MenuItem, MenuItemAddon
from backoffice.models.user import User
from backoffice.schemas.menu import (
    AddonLinkCreate,
    AddonLinkResponse,
    AddonLinkUpdate,
    AddonResponse,
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
    MenuSearchResult,
    OptionGroupLinkCreate,
    OptionGroupResponse,
)
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services import composition
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[MenuItemResponse])
async def list_menu_items(
    category_id: Optional[int] = None,
    is_popular: Optional[int] = Query(None, ge=0, le=1),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List menu items"""
    query = select(MenuItem)

    if category_id is not None:
        query = query.where(MenuItem.category_id == category_id)

    if is_popular is not None:
        query = query.where(MenuItem.is_popular == is_popular)

    query = query.order_by(MenuItem.view_order, MenuItem.name)

    result = await db.execute(query)
    return result.scalars().all()


@router.get("/search", response_model=MenuSearchResult)
async def search_menu(
    query: str = Query(..., min_length=1),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Search menu items by name or description"""
    search_term = f"%{query.lower()}%"

    result = await db.execute(
        select(MenuItem)
        .where(
            or_(
                MenuItem.name.ilike(search_term),
                MenuItem.description.ilike(search_term),
            )
        )
        .order_by(MenuItem.name)
        .limit(20)
    )
    items = result.scalars().all()

    return MenuSearchResult(items=items, total=len(items))


@router.post("", response_model=MenuItemResponse, status_code=201)
async def create_menu_item(
    item_data: MenuItemCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Create a new menu item"""
    if item_data.category_id is not None:
        await get_or_404(db, Category, item_data.category_id, "Category")

    item = MenuItem(**item_data.model_dump())
    async with transaction(db, "Create menu item"):
        db.add(item)

    logger.info("Menu item created", menu_item_id=item.id)
    return item


@router.get("/{item_id}", response_model=MenuItemResponse)
async def get_menu_item(
    item_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific menu item"""
    return await get_or_404(db, MenuItem, item_id, "Menu item")


@router.put("/{item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    item_id: int,
    item_data: MenuItemUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Update a menu item"""
    item = await get_or_404(db, MenuItem, item_id, "Menu item")
    changes = item_data.model_dump(exclude_unset=True)

    if changes.get("category_id") is not None:
        await get_or_404(db, Category, changes["category_id"], "Category")

    async with transaction(db, "Update menu item"):
        for field, value in changes.items():
            setattr(item, field, value)

    return item


@router.delete("/{item_id}", status_code=204)
async def delete_menu_item(
    item_id: int,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Delete a menu item and its addon/option group links"""
    await composition.delete_menu_item(db, item_id)


# Addons

@router.get("/{item_id}/addons", response_model=List[AddonLinkResponse])
async def list_item_addons(
    item_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Addons linked to a menu item"""
    return await composition.list_linked_addons(db, item_id)


@router.get("/{item_id}/addons/available", response_model=List[AddonResponse])
async def list_available_addons(
    item_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Addons not yet linked to the menu item"""
    return await composition.list_available_addons(db, item_id)


@router.post("/{item_id}/addons", response_model=AddonLinkResponse, status_code=201)
async def link_addon(
    item_id: int,
    link_data: AddonLinkCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Link an addon to a menu item"""
    return await composition.link_addon(
        db,
        item_id,
        link_data.addon_id,
        is_default=link_data.is_default,
        is_required=link_data.is_required,
        max_quantity=link_data.max_quantity,
    )


@router.put("/{item_id}/addons/{link_id}", response_model=AddonLinkResponse)
async def update_addon_link(
    item_id: int,
    link_id: UUID,
    link_data: AddonLinkUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Change default/required/max quantity of a linked addon"""
    link = await get_or_404(db, MenuItemAddon, link_id, "Menu item addon")
    if link.menu_item_id != item_id:
        raise NotFoundError("Menu item addon not found")

    return await composition.update_addon_link(
        db,
        link_id,
        is_default=link_data.is_default,
        is_required=link_data.is_required,
        max_quantity=link_data.max_quantity,
    )


@router.delete("/{item_id}/addons/{link_id}", status_code=204)
async def unlink_addon(
    item_id: int,
    link_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Remove an addon link; the addon itself is kept"""
    await composition.unlink_addon(db, item_id, link_id)


@router.delete("/{item_id}/addons", status_code=204)
async def unlink_addon_by_addon(
    item_id: int,
    addon_id: UUID = Query(...),
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Remove the link between this menu item and an addon, if any"""
    await composition.unlink_addon_from_item(db, item_id, addon_id)


# Option groups

@router.get("/{item_id}/option_groups", response_model=List[OptionGroupResponse])
async def list_item_option_groups(
    item_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Option groups linked to a menu item"""
    return await composition.list_linked_option_groups(db, item_id)


@router.get("/{item_id}/option_groups/available", response_model=List[OptionGroupResponse])
async def list_available_option_groups(
    item_id: int,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Option groups not yet linked to the menu item"""
    return await composition.list_available_option_groups(db, item_id)


@router.post("/{item_id}/option_groups", response_model=OptionGroupResponse, status_code=201)
async def link_option_group(
    item_id: int,
    link_data: OptionGroupLinkCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Offer an option group on a menu item"""
    return await composition.link_option_group(db, item_id, link_data.option_group_id)


@router.delete("/{item_id}/option_groups/{option_group_id}", status_code=204)
async def unlink_option_group(
    item_id: int,
    option_group_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Stop offering an option group on a menu item"""
    await composition.unlink_option_group(db, item_id, option_group_id)
