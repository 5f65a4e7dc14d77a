"""Order model"""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, JSON, Text, Integer, Uuid, Float

from backoffice.database import Base


class OrderStatus(str, enum.Enum):
    """Order lifecycle states"""
    ORDER_PLACED = "ORDER_PLACED"
    PREPARING = "PREPARING"
    READY_FOR_DELIVERY = "READY_FOR_DELIVERY"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class PaymentMethod(str, enum.Enum):
    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    MOBILE_PAYMENT = "MOBILE_PAYMENT"
    ONLINE = "ONLINE"


class DeliveryMethod(str, enum.Enum):
    PICKUP = "PICKUP"
    DELIVERY = "DELIVERY"


# Allowed next states for each order status
ORDER_TRANSITIONS = {
    OrderStatus.ORDER_PLACED: {OrderStatus.PREPARING, OrderStatus.CANCELLED},
    OrderStatus.PREPARING: {OrderStatus.READY_FOR_DELIVERY, OrderStatus.CANCELLED},
    OrderStatus.READY_FOR_DELIVERY: {
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELIVERED,  # pickup orders
        OrderStatus.CANCELLED,
    },
    OrderStatus.OUT_FOR_DELIVERY: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


class Order(Base):
    """Customer orders"""
    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255))

    # Contact and delivery
    phone_number = Column(String(30), nullable=False)
    delivery_address = Column(Text)
    delivery_method = Column(String(20))
    delivery_latitude = Column(Float)
    delivery_longitude = Column(Float)
    driver_id = Column(Uuid, ForeignKey("drivers.id"))
    tracking_id = Column(String(100))

    # Order details
    # [{"id": "...", "name": "...", "quantity": 1, "price_cents": 1500, "notes": "...", "options": [...]}, ...]
    order_items = Column(JSON, nullable=False, default=list)
    order_note = Column(Text)

    # Pricing
    delivery_amount_cents = Column(Integer, default=0)
    vat_cents = Column(Integer, default=0)
    total_amount_cents = Column(Integer, nullable=False, default=0)
    currency = Column(String(10))
    reward_points = Column(Integer, default=0)

    # Status
    status = Column(String(30), default=OrderStatus.ORDER_PLACED.value)
    payment_method = Column(String(30))
    payment_status = Column(String(20), default=PaymentStatus.PENDING.value)
    transaction_id = Column(String(255))
    payment_failure_reason = Column(Text)
    payment_confirmed_at = Column(DateTime)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
