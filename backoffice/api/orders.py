"""Order management API endpoints"""

import math
from datetime import date, datetime, time, timedelta
from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.database import get_db
from backoffice.models.order import Order
from backoffice.models.user import User
from backoffice.schemas.order import (
    OrderCreate,
    OrderListResponse,
    OrderResponse,
    OrderStatusUpdate,
    OrderUpdate,
)
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.orders import check_transition, compute_order_totals
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=OrderListResponse)
async def list_orders(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    status: Optional[str] = None,
    payment_status: Optional[str] = None,
    from_date: Optional[date] = None,
    to_date: Optional[date] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List orders with pagination, newest first"""
    filters = []

    if status:
        filters.append(Order.status == status)

    if payment_status:
        filters.append(Order.payment_status == payment_status)

    # Both bounds are whole days
    if from_date:
        filters.append(Order.created_at >= datetime.combine(from_date, time.min))

    if to_date:
        filters.append(Order.created_at < datetime.combine(to_date + timedelta(days=1), time.min))

    # Get total
    total_result = await db.execute(select(func.count(Order.id)).where(*filters))
    total = total_result.scalar()

    # Get paginated results
    offset = (page - 1) * page_size
    result = await db.execute(
        select(Order)
        .where(*filters)
        .order_by(Order.created_at.desc())
        .offset(offset)
        .limit(page_size)
    )

    return OrderListResponse(
        items=result.scalars().all(),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


@router.post("", response_model=OrderResponse, status_code=201)
async def create_order(
    order_data: OrderCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Create a new order; totals are computed from the line items"""
    items = [item.model_dump() for item in order_data.order_items]
    totals = compute_order_totals(items, order_data.delivery_method)

    order = Order(
        **order_data.model_dump(exclude={"order_items"}),
        order_items=items,
        delivery_amount_cents=totals["delivery_amount_cents"],
        vat_cents=totals["vat_cents"],
        total_amount_cents=totals["total_amount_cents"],
    )
    if not order.currency:
        order.currency = settings.currency

    async with transaction(db, "Create order"):
        db.add(order)

    logger.info("Order created", order_id=str(order.id), total_cents=order.total_amount_cents)
    return order


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get order details"""
    return await get_or_404(db, Order, order_id, "Order")


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: UUID,
    order_data: OrderUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Update order details"""
    order = await get_or_404(db, Order, order_id, "Order")
    changes = order_data.model_dump(exclude_unset=True)

    async with transaction(db, "Update order"):
        for field, value in changes.items():
            setattr(order, field, value)
        if changes.get("payment_status") == "PAID" and order.payment_confirmed_at is None:
            order.payment_confirmed_at = datetime.utcnow()

    return order


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: UUID,
    status_data: OrderStatusUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Move an order along its lifecycle"""
    order = await get_or_404(db, Order, order_id, "Order")
    previous = order.status
    check_transition(previous, status_data.status)

    async with transaction(db, "Update order status"):
        order.status = status_data.status

    logger.info(
        "Order status changed",
        order_id=str(order_id),
        from_status=previous,
        to_status=order.status,
        user_id=str(current_user.id),
    )
    return order
