"""Order report endpoints"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.database import get_db
from backoffice.errors import ValidationFailed
from backoffice.models.order import Order
from backoffice.models.user import User
from backoffice.schemas.order import OrderListResponse, OrderSummary
from backoffice.api.auth import get_current_active_user
from backoffice.services.order_report import (
    SORTABLE_FIELDS,
    filter_orders,
    paginate,
    sort_orders,
    summarize_orders,
)

router = APIRouter()


@router.get("/orders", response_model=OrderListResponse)
async def order_report(
    search: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    status: Optional[str] = None,
    payment_status: Optional[str] = None,
    payment_method: Optional[str] = None,
    delivery_method: Optional[str] = None,
    item: Optional[str] = Query(None, description="Match line item names"),
    sort_by: str = "created_at",
    sort_dir: str = Query("desc", pattern="^(asc|desc)$"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Filter, sort and page through all orders"""
    if sort_by not in SORTABLE_FIELDS:
        raise ValidationFailed(f"Cannot sort by {sort_by}")

    result = await db.execute(select(Order))
    orders = result.scalars().all()

    column_filters = {
        "status": status,
        "payment_status": payment_status,
        "payment_method": payment_method,
        "delivery_method": delivery_method,
        "order_items": item,
    }
    filtered = filter_orders(orders, search, start_date, end_date, column_filters)
    ordered = sort_orders(filtered, sort_by, descending=sort_dir == "desc")
    items, total, total_pages = paginate(ordered, page, page_size)

    return OrderListResponse(
        items=items,
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )


@router.get("/orders/summary", response_model=OrderSummary)
async def order_summary(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Headline numbers: totals, today's figures, pending and in-delivery counts"""
    result = await db.execute(select(Order))
    return summarize_orders(result.scalars().all())
