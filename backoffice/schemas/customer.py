"""Order feedback and reward schemas"""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID
from pydantic import BaseModel, Field, field_validator


class FeedbackCreate(BaseModel):
    """Create order feedback request"""
    order_id: UUID
    user_id: str
    rating: int = Field(..., ge=1, le=5)
    food_quality_rating: Optional[int] = Field(None, ge=1, le=5)
    delivery_rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None
    is_anonymous: bool = False


class FeedbackUpdate(BaseModel):
    """Update order feedback request"""
    rating: Optional[int] = Field(None, ge=1, le=5)
    food_quality_rating: Optional[int] = Field(None, ge=1, le=5)
    delivery_rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None
    status: Optional[Literal["active", "inactive", "deleted"]] = None
    is_anonymous: Optional[bool] = None

    @field_validator("rating")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class FeedbackResponse(BaseModel):
    """Order feedback response"""
    id: UUID
    order_id: UUID
    user_id: str
    rating: int
    food_quality_rating: Optional[int]
    delivery_rating: Optional[int]
    comment: Optional[str]
    status: str
    is_anonymous: bool
    created_at: datetime
    updated_at: Optional[datetime]
    deleted_at: Optional[datetime]

    class Config:
        from_attributes = True


class RewardCreate(BaseModel):
    user_id: str
    points: int = Field(0, ge=0)


class RewardAdjust(BaseModel):
    """Add (positive) or remove (negative) points"""
    points_change: int


class RewardResponse(BaseModel):
    """Reward balance response"""
    id: UUID
    user_id: str
    points: int
    last_updated: Optional[datetime]

    class Config:
        from_attributes = True
