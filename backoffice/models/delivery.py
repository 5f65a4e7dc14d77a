"""Driver and delivery models"""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Float, Uuid

from backoffice.database import Base


class DeliveryStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DELIVERED = "delivered"
    FAILED = "failed"


class Driver(Base):
    """Delivery drivers"""
    __tablename__ = "drivers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=False)
    email = Column(String(255))
    is_active = Column(Boolean, default=True)
    vehicle_type = Column(String(50))
    license_number = Column(String(100))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, onupdate=datetime.utcnow)


class Delivery(Base):
    """Delivery runs for orders"""
    __tablename__ = "deliveries"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id"), nullable=False)
    driver_id = Column(Uuid, ForeignKey("drivers.id"))
    status = Column(String(20), default=DeliveryStatus.PENDING.value)

    # Last known positions
    customer_lat = Column(Float)
    customer_lng = Column(Float)
    driver_lat = Column(Float)
    driver_lng = Column(Float)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
