"""Invoice API endpoints"""

import math
from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select, func, or_, delete
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import settings
from backoffice.database import get_db
from backoffice.models.billing import Invoice, InvoiceItem
from backoffice.models.user import User
from backoffice.schemas.billing import (
    InvoiceCreate,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    search: Optional[str] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List invoices, newest first, optionally searching number or customer"""
    filters = []
    if search:
        term = f"%{search}%"
        filters.append(or_(Invoice.invoice_number.ilike(term), Invoice.customer_name.ilike(term)))

    total = (await db.execute(select(func.count(Invoice.id)).where(*filters))).scalar()

    result = await db.execute(
        select(Invoice)
        .where(*filters)
        .order_by(Invoice.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )

    return InvoiceListResponse(
        items=result.scalars().all(),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


@router.post("", response_model=InvoiceResponse, status_code=201)
async def create_invoice(
    invoice_data: InvoiceCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Create an invoice with its line items; amounts are computed here"""
    items = [
        InvoiceItem(
            **item.model_dump(),
            total_price_cents=item.unit_price_cents * item.quantity,
        )
        for item in invoice_data.items
    ]
    subtotal = sum(item.total_price_cents for item in items)
    tax = int(round(subtotal * settings.vat_rate))
    total = max(0, subtotal + tax + invoice_data.tip_amount_cents - invoice_data.discount_amount_cents)

    invoice = Invoice(
        **invoice_data.model_dump(exclude={"items"}),
        subtotal_cents=subtotal,
        tax_amount_cents=tax,
        total_amount_cents=total,
        items=items,
    )

    async with transaction(db, "Create invoice", "Invoice number already exists"):
        db.add(invoice)

    logger.info("Invoice created", invoice_number=invoice.invoice_number, total_cents=total)
    return invoice


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Invoice with its line items"""
    return await get_or_404(db, Invoice, invoice_id, "Invoice")


@router.put("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(
    invoice_id: UUID,
    invoice_data: InvoiceUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    invoice = await get_or_404(db, Invoice, invoice_id, "Invoice")

    async with transaction(db, "Update invoice"):
        for field, value in invoice_data.model_dump(exclude_unset=True).items():
            setattr(invoice, field, value)

    return invoice


@router.delete("/{invoice_id}", status_code=204)
async def delete_invoice(
    invoice_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Delete an invoice and its line items"""
    await get_or_404(db, Invoice, invoice_id, "Invoice")

    async with transaction(db, "Delete invoice", "Invoice still has payments recorded against it"):
        await db.execute(delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id))
        await db.execute(delete(Invoice).where(Invoice.id == invoice_id))
