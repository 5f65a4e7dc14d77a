"""Option group API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.models.menu import OptionGroup
from backoffice.models.user import User
from backoffice.schemas.menu import (
    MenuOptionResponse,
    OptionGroupCreate,
    OptionGroupResponse,
    OptionGroupUpdate,
    OptionLinkCreate,
)
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services import composition
from backoffice.services.store import get_or_404, transaction

router = APIRouter()


@router.get("", response_model=List[OptionGroupResponse])
async def list_option_groups(
    is_active: Optional[bool] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    query = select(OptionGroup)
    if is_active is not None:
        query = query.where(OptionGroup.is_active == is_active)

    result = await db.execute(query.order_by(OptionGroup.name))
    return result.scalars().all()


@router.post("", response_model=OptionGroupResponse, status_code=201)
async def create_option_group(
    group_data: OptionGroupCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    group = OptionGroup(**group_data.model_dump())
    async with transaction(db, "Create option group"):
        db.add(group)
    return group


@router.get("/{group_id}", response_model=OptionGroupResponse)
async def get_option_group(
    group_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, OptionGroup, group_id, "Option group")


@router.put("/{group_id}", response_model=OptionGroupResponse)
async def update_option_group(
    group_id: UUID,
    group_data: OptionGroupUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    group = await get_or_404(db, OptionGroup, group_id, "Option group")

    async with transaction(db, "Update option group"):
        for field, value in group_data.model_dump(exclude_unset=True).items():
            setattr(group, field, value)

    return group


@router.delete("/{group_id}", status_code=204)
async def delete_option_group(
    group_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Delete an option group, its option links and its menu item links"""
    await composition.delete_option_group(db, group_id)


@router.get("/{group_id}/options", response_model=List[MenuOptionResponse])
async def list_group_options(
    group_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await composition.list_group_options(db, group_id)


@router.get("/{group_id}/options/available", response_model=List[MenuOptionResponse])
async def list_available_options(
    group_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Options not yet in this group"""
    return await composition.list_available_options(db, group_id)


@router.post("/{group_id}/options", response_model=MenuOptionResponse, status_code=201)
async def link_option(
    group_id: UUID,
    link_data: OptionLinkCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    return await composition.link_option(db, group_id, link_data.option_id)


@router.delete("/{group_id}/options/{option_id}", status_code=204)
async def unlink_option(
    group_id: UUID,
    option_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    await composition.unlink_option(db, group_id, option_id)
