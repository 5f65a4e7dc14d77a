"""Driver API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.models.delivery import Driver
from backoffice.models.user import User
from backoffice.schemas.delivery import DriverCreate, DriverResponse, DriverUpdate
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.store import get_or_404, transaction

router = APIRouter()


@router.get("", response_model=List[DriverResponse])
async def list_drivers(
    is_active: Optional[bool] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    query = select(Driver)
    if is_active is not None:
        query = query.where(Driver.is_active == is_active)

    result = await db.execute(query.order_by(Driver.name))
    return result.scalars().all()


@router.post("", response_model=DriverResponse, status_code=201)
async def create_driver(
    driver_data: DriverCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    driver = Driver(**driver_data.model_dump())
    async with transaction(db, "Create driver"):
        db.add(driver)
    return driver


@router.get("/{driver_id}", response_model=DriverResponse)
async def get_driver(
    driver_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Driver, driver_id, "Driver")


@router.put("/{driver_id}", response_model=DriverResponse)
async def update_driver(
    driver_id: UUID,
    driver_data: DriverUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    driver = await get_or_404(db, Driver, driver_id, "Driver")

    async with transaction(db, "Update driver"):
        for field, value in driver_data.model_dump(exclude_unset=True).items():
            setattr(driver, field, value)

    return driver


@router.delete("/{driver_id}", status_code=204)
async def delete_driver(
    driver_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    driver = await get_or_404(db, Driver, driver_id, "Driver")
    async with transaction(db, "Delete driver", "Driver still has deliveries or orders assigned"):
        await db.delete(driver)
