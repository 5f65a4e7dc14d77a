"""Delivery API endpoints"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.models.delivery import Delivery, DeliveryStatus, Driver
from backoffice.models.order import Order
from backoffice.models.user import User
from backoffice.schemas.delivery import (
    DeliveryCreate,
    DeliveryResponse,
    DeliveryStats,
    DeliveryStatusUpdate,
    DeliveryUpdate,
)
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[DeliveryResponse])
async def list_deliveries(
    status: Optional[DeliveryStatus] = None,
    driver_id: Optional[UUID] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List deliveries, newest first"""
    query = select(Delivery)
    if status:
        query = query.where(Delivery.status == status.value)
    if driver_id:
        query = query.where(Delivery.driver_id == driver_id)

    result = await db.execute(query.order_by(Delivery.created_at.desc()))
    return result.scalars().all()


@router.get("/stats", response_model=DeliveryStats)
async def delivery_stats(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delivery counts per status"""
    result = await db.execute(
        select(Delivery.status, func.count(Delivery.id)).group_by(Delivery.status)
    )
    counts = dict(result.all())

    return DeliveryStats(
        total=sum(counts.values()),
        pending=counts.get(DeliveryStatus.PENDING.value, 0),
        in_progress=counts.get(DeliveryStatus.IN_PROGRESS.value, 0),
        delivered=counts.get(DeliveryStatus.DELIVERED.value, 0),
        failed=counts.get(DeliveryStatus.FAILED.value, 0),
    )


@router.post("", response_model=DeliveryResponse, status_code=201)
async def create_delivery(
    delivery_data: DeliveryCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Create a delivery run for an order"""
    await get_or_404(db, Order, delivery_data.order_id, "Order")
    if delivery_data.driver_id:
        await get_or_404(db, Driver, delivery_data.driver_id, "Driver")

    delivery = Delivery(**delivery_data.model_dump())
    async with transaction(db, "Create delivery"):
        db.add(delivery)

    logger.info("Delivery created", delivery_id=str(delivery.id), order_id=str(delivery.order_id))
    return delivery


@router.get("/{delivery_id}", response_model=DeliveryResponse)
async def get_delivery(
    delivery_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Delivery, delivery_id, "Delivery")


@router.put("/{delivery_id}", response_model=DeliveryResponse)
async def update_delivery(
    delivery_id: UUID,
    delivery_data: DeliveryUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Reassign the driver or record positions"""
    delivery = await get_or_404(db, Delivery, delivery_id, "Delivery")
    changes = delivery_data.model_dump(exclude_unset=True)

    if changes.get("driver_id"):
        await get_or_404(db, Driver, changes["driver_id"], "Driver")

    async with transaction(db, "Update delivery"):
        for field, value in changes.items():
            setattr(delivery, field, value)

    return delivery


@router.patch("/{delivery_id}/status", response_model=DeliveryResponse)
async def update_delivery_status(
    delivery_id: UUID,
    status_data: DeliveryStatusUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    delivery = await get_or_404(db, Delivery, delivery_id, "Delivery")

    async with transaction(db, "Update delivery status"):
        delivery.status = status_data.status

    logger.info("Delivery status changed", delivery_id=str(delivery_id), status=delivery.status)
    return delivery


@router.delete("/{delivery_id}", status_code=204)
async def delete_delivery(
    delivery_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    delivery = await get_or_404(db, Delivery, delivery_id, "Delivery")
    async with transaction(db, "Delete delivery"):
        await db.delete(delivery)
