"""Addon API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.models.menu import Addon
from backoffice.models.user import User
from backoffice.schemas.menu import AddonCreate, AddonResponse, AddonUpdate
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services import composition
from backoffice.services.store import get_or_404, transaction

router = APIRouter()


@router.get("", response_model=List[AddonResponse])
async def list_addons(
    is_available: Optional[bool] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List addons by name"""
    query = select(Addon)
    if is_available is not None:
        query = query.where(Addon.is_available == is_available)

    result = await db.execute(query.order_by(Addon.name))
    return result.scalars().all()


@router.post("", response_model=AddonResponse, status_code=201)
async def create_addon(
    addon_data: AddonCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    addon = Addon(**addon_data.model_dump())
    async with transaction(db, "Create addon"):
        db.add(addon)
    return addon


@router.get("/{addon_id}", response_model=AddonResponse)
async def get_addon(
    addon_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Addon, addon_id, "Addon")


@router.put("/{addon_id}", response_model=AddonResponse)
async def update_addon(
    addon_id: UUID,
    addon_data: AddonUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    addon = await get_or_404(db, Addon, addon_id, "Addon")

    async with transaction(db, "Update addon"):
        for field, value in addon_data.model_dump(exclude_unset=True).items():
            setattr(addon, field, value)

    return addon


@router.delete("/{addon_id}", status_code=204)
async def delete_addon(
    addon_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Delete an addon and every menu item link to it"""
    await composition.delete_addon(db, addon_id)
