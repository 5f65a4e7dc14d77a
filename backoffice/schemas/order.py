"""Order schemas"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID
from pydantic import BaseModel, Field

from backoffice.models.order import DeliveryMethod, OrderStatus, PaymentMethod, PaymentStatus


class OrderItem(BaseModel):
    """Order line item"""
    id: Optional[str] = None
    name: str
    quantity: int = Field(1, ge=1)
    price_cents: int = Field(0, ge=0)
    notes: Optional[str] = None
    options: List[Dict[str, Any]] = []


class OrderCreate(BaseModel):
    """Create order request"""
    phone_number: str
    order_items: List[OrderItem] = Field(..., min_length=1)
    delivery_method: DeliveryMethod = DeliveryMethod.PICKUP
    delivery_address: Optional[str] = None
    delivery_latitude: Optional[float] = None
    delivery_longitude: Optional[float] = None
    payment_method: Optional[PaymentMethod] = None
    order_note: Optional[str] = None
    user_id: Optional[str] = None
    currency: Optional[str] = None

    class Config:
        use_enum_values = True
        validate_default = True


class OrderUpdate(BaseModel):
    """Update order details (status changes go through the status endpoint)"""
    delivery_address: Optional[str] = None
    driver_id: Optional[UUID] = None
    tracking_id: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    payment_status: Optional[PaymentStatus] = None
    transaction_id: Optional[str] = None
    payment_failure_reason: Optional[str] = None
    order_note: Optional[str] = None
    reward_points: Optional[int] = Field(None, ge=0)

    class Config:
        use_enum_values = True
        validate_default = True


class OrderStatusUpdate(BaseModel):
    """Move an order to its next status"""
    status: OrderStatus

    class Config:
        use_enum_values = True
        validate_default = True


class OrderResponse(BaseModel):
    """Order response"""
    id: UUID
    user_id: Optional[str]
    phone_number: str
    delivery_address: Optional[str]
    delivery_method: Optional[str]
    delivery_latitude: Optional[float]
    delivery_longitude: Optional[float]
    driver_id: Optional[UUID]
    tracking_id: Optional[str]
    order_items: List[OrderItem]
    order_note: Optional[str]
    delivery_amount_cents: Optional[int]
    vat_cents: Optional[int]
    total_amount_cents: int
    currency: Optional[str]
    reward_points: Optional[int]
    status: Optional[str]
    payment_method: Optional[str]
    payment_status: Optional[str]
    transaction_id: Optional[str]
    payment_failure_reason: Optional[str]
    payment_confirmed_at: Optional[datetime]
    created_at: datetime
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class OrderListResponse(BaseModel):
    """Paginated order list"""
    items: List[OrderResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class OrderSummary(BaseModel):
    """Headline order numbers"""
    total_orders: int
    todays_orders: int
    total_revenue_cents: int
    todays_revenue_cents: int
    pending_orders: int
    out_for_delivery: int
    by_status: Dict[str, int]
