"""Menu option API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.models.menu import MenuOption
from backoffice.models.user import User
from backoffice.schemas.menu import MenuOptionCreate, MenuOptionResponse, MenuOptionUpdate
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services import composition
from backoffice.services.store import get_or_404, transaction

router = APIRouter()


@router.get("", response_model=List[MenuOptionResponse])
async def list_menu_options(
    is_active: Optional[bool] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List menu options, newest first"""
    query = select(MenuOption)
    if is_active is not None:
        query = query.where(MenuOption.is_active == is_active)

    result = await db.execute(query.order_by(MenuOption.created_at.desc()))
    return result.scalars().all()


@router.post("", response_model=MenuOptionResponse, status_code=201)
async def create_menu_option(
    option_data: MenuOptionCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    option = MenuOption(**option_data.model_dump())
    async with transaction(db, "Create menu option"):
        db.add(option)
    return option


@router.get("/{option_id}", response_model=MenuOptionResponse)
async def get_menu_option(
    option_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, MenuOption, option_id, "Menu option")


@router.put("/{option_id}", response_model=MenuOptionResponse)
async def update_menu_option(
    option_id: UUID,
    option_data: MenuOptionUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    option = await get_or_404(db, MenuOption, option_id, "Menu option")

    async with transaction(db, "Update menu option"):
        for field, value in option_data.model_dump(exclude_unset=True).items():
            setattr(option, field, value)

    return option


@router.delete("/{option_id}", status_code=204)
async def delete_menu_option(
    option_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Delete an option and remove it from every option group"""
    await composition.delete_menu_option(db, option_id)
