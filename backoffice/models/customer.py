"""Customer-facing records: order feedback and reward balances"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, Text, Uuid, UniqueConstraint

from backoffice.database import Base


class OrderFeedback(Base):
    """Ratings left by customers after an order"""
    __tablename__ = "order_feedback"
    __table_args__ = (
        UniqueConstraint("order_id", "user_id", name="uq_order_feedback_order_user"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id"), nullable=False)
    user_id = Column(String(255), nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5
    food_quality_rating = Column(Integer)
    delivery_rating = Column(Integer)
    comment = Column(Text)
    status = Column(String(20), default="active")  # active, inactive, deleted
    is_anonymous = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime)


class Reward(Base):
    """Loyalty point balance per customer"""
    __tablename__ = "rewards"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), unique=True, nullable=False)
    points = Column(Integer, nullable=False, default=0)
    last_updated = Column(DateTime, default=datetime.utcnow)
