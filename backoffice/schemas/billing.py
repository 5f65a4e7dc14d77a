"""Invoice and payment schemas"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, Field

from backoffice.models.order import PaymentMethod, PaymentStatus


class InvoiceItemCreate(BaseModel):
    """Invoice line item"""
    menu_item_id: Optional[int] = None
    description: str
    quantity: int = Field(1, ge=1)
    unit_price_cents: int = Field(0, ge=0)


class InvoiceItemResponse(BaseModel):
    id: UUID
    menu_item_id: Optional[int]
    description: str
    quantity: int
    unit_price_cents: int
    total_price_cents: int

    class Config:
        from_attributes = True


class InvoiceCreate(BaseModel):
    """Create invoice request"""
    invoice_number: str
    customer_name: Optional[str] = None
    table_number: Optional[int] = None
    server_name: Optional[str] = None
    items: List[InvoiceItemCreate] = Field(..., min_length=1)
    tip_amount_cents: int = Field(0, ge=0)
    discount_amount_cents: int = Field(0, ge=0)
    notes: Optional[str] = None


class InvoiceUpdate(BaseModel):
    """Update invoice request"""
    customer_name: Optional[str] = None
    table_number: Optional[int] = None
    server_name: Optional[str] = None
    status: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True
        validate_default = True


class InvoiceResponse(BaseModel):
    """Invoice response"""
    id: UUID
    invoice_number: str
    customer_name: Optional[str]
    table_number: Optional[int]
    server_name: Optional[str]
    status: str
    subtotal_cents: int
    tax_amount_cents: int
    tip_amount_cents: int
    discount_amount_cents: int
    total_amount_cents: int
    payment_method: Optional[str]
    payment_date: Optional[datetime]
    notes: Optional[str]
    items: List[InvoiceItemResponse] = []
    created_at: datetime
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    """Paginated invoice list"""
    items: List[InvoiceResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class PaymentCreate(BaseModel):
    """Record a payment"""
    payment_number: str
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    invoice_id: Optional[UUID] = None
    amount_paid_cents: int = Field(..., ge=0)
    payment_method: PaymentMethod
    payment_status: PaymentStatus = PaymentStatus.PENDING
    transaction_id: Optional[str] = None
    payment_date: Optional[datetime] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True
        validate_default = True


class PaymentUpdate(BaseModel):
    """Update payment request"""
    payment_status: Optional[PaymentStatus] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        use_enum_values = True
        validate_default = True


class PaymentResponse(BaseModel):
    """Payment response"""
    id: UUID
    payment_number: str
    customer_id: Optional[str]
    customer_name: Optional[str]
    invoice_id: Optional[UUID]
    amount_paid_cents: int
    payment_method: str
    payment_status: str
    transaction_id: Optional[str]
    payment_date: Optional[datetime]
    notes: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class PaymentListResponse(BaseModel):
    """Paginated payment list"""
    items: List[PaymentResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class PaymentStats(BaseModel):
    total_payments: int
    completed_amount_cents: int
    pending_amount_cents: int
