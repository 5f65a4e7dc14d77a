"""Driver and delivery schemas"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, EmailStr, field_validator

from backoffice.models.delivery import DeliveryStatus


class DriverCreate(BaseModel):
    """Create driver request"""
    name: str
    phone: str
    email: Optional[EmailStr] = None
    is_active: bool = True
    vehicle_type: Optional[str] = None
    license_number: Optional[str] = None


class DriverUpdate(BaseModel):
    """Update driver request"""
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    is_active: Optional[bool] = None
    vehicle_type: Optional[str] = None
    license_number: Optional[str] = None

    @field_validator("name", "phone")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class DriverResponse(BaseModel):
    """Driver response"""
    id: UUID
    name: str
    phone: str
    email: Optional[str]
    is_active: bool
    vehicle_type: Optional[str]
    license_number: Optional[str]
    created_at: datetime
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class DeliveryCreate(BaseModel):
    """Create delivery request"""
    order_id: UUID
    driver_id: Optional[UUID] = None
    customer_lat: Optional[float] = None
    customer_lng: Optional[float] = None


class DeliveryUpdate(BaseModel):
    """Update delivery request"""
    driver_id: Optional[UUID] = None
    customer_lat: Optional[float] = None
    customer_lng: Optional[float] = None
    driver_lat: Optional[float] = None
    driver_lng: Optional[float] = None


class DeliveryStatusUpdate(BaseModel):
    status: DeliveryStatus

    class Config:
        use_enum_values = True
        validate_default = True


class DeliveryResponse(BaseModel):
    """Delivery response"""
    id: UUID
    order_id: UUID
    driver_id: Optional[UUID]
    status: str
    customer_lat: Optional[float]
    customer_lng: Optional[float]
    driver_lat: Optional[float]
    driver_lng: Optional[float]
    created_at: datetime
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class DeliveryStats(BaseModel):
    """Delivery counts by status"""
    total: int
    pending: int
    in_progress: int
    delivered: int
    failed: int
