"""Payment API endpoints"""

import math
from datetime import date, datetime, time
from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select, func, case
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.database import get_db
from backoffice.models.billing import Invoice, Payment
from backoffice.models.order import PaymentStatus
from backoffice.models.user import User
from backoffice.schemas.billing import (
    PaymentCreate,
    PaymentListResponse,
    PaymentResponse,
    PaymentStats,
    PaymentUpdate,
)
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


def _payment_filters(
    start_date: Optional[date],
    end_date: Optional[date],
    customer_id: Optional[str],
    status: Optional[str],
) -> list:
    filters = []
    if start_date:
        filters.append(Payment.payment_date >= datetime.combine(start_date, time.min))
    if end_date:
        filters.append(Payment.payment_date <= datetime.combine(end_date, time.max))
    if customer_id:
        filters.append(Payment.customer_id == customer_id)
    if status:
        filters.append(Payment.payment_status == status)
    return filters


@router.get("", response_model=PaymentListResponse)
async def list_payments(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    customer_id: Optional[str] = None,
    status: Optional[PaymentStatus] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List payments, most recent payment date first"""
    filters = _payment_filters(start_date, end_date, customer_id, status.value if status else None)

    total = (await db.execute(select(func.count(Payment.id)).where(*filters))).scalar()
    result = await db.execute(
        select(Payment)
        .where(*filters)
        .order_by(Payment.payment_date.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )

    return PaymentListResponse(
        items=result.scalars().all(),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


@router.get("/stats", response_model=PaymentStats)
async def payment_stats(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    customer_id: Optional[str] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Payment count plus paid and pending totals"""
    filters = _payment_filters(start_date, end_date, customer_id, None)

    def amount_when(status: PaymentStatus):
        return func.coalesce(
            func.sum(case((Payment.payment_status == status.value, Payment.amount_paid_cents), else_=0)),
            0,
        )

    result = await db.execute(
        select(
            func.count(Payment.id),
            amount_when(PaymentStatus.PAID),
            amount_when(PaymentStatus.PENDING),
        ).where(*filters)
    )
    count, completed, pending = result.one()

    return PaymentStats(
        total_payments=count,
        completed_amount_cents=completed,
        pending_amount_cents=pending,
    )


@router.post("", response_model=PaymentResponse, status_code=201)
async def create_payment(
    payment_data: PaymentCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Record a payment, optionally against an invoice"""
    if payment_data.invoice_id:
        await get_or_404(db, Invoice, payment_data.invoice_id, "Invoice")

    values = payment_data.model_dump()
    if values["payment_date"] is None:
        values["payment_date"] = datetime.utcnow()

    payment = Payment(**values)
    async with transaction(db, "Create payment", "Payment number already exists"):
        db.add(payment)

    logger.info("Payment recorded", payment_number=payment.payment_number, status=payment.payment_status)
    return payment


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Payment, payment_id, "Payment")


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: UUID,
    payment_data: PaymentUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    payment = await get_or_404(db, Payment, payment_id, "Payment")

    async with transaction(db, "Update payment"):
        for field, value in payment_data.model_dump(exclude_unset=True).items():
            setattr(payment, field, value)

    return payment


@router.delete("/{payment_id}", status_code=204)
async def delete_payment(
    payment_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    payment = await get_or_404(db, Payment, payment_id, "Payment")
    async with transaction(db, "Delete payment"):
        await db.delete(payment)
