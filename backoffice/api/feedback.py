"""Order feedback API endpoints"""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.models.customer import OrderFeedback
from backoffice.models.order import Order
from backoffice.models.user import User
from backoffice.schemas.customer import FeedbackCreate, FeedbackResponse, FeedbackUpdate
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[FeedbackResponse])
async def list_feedback(
    status: Optional[Literal["active", "inactive", "deleted"]] = None,
    order_id: Optional[UUID] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List feedback, newest first; soft-deleted entries only when asked for"""
    query = select(OrderFeedback)

    if status:
        query = query.where(OrderFeedback.status == status)
    else:
        query = query.where(OrderFeedback.status != "deleted")

    if order_id:
        query = query.where(OrderFeedback.order_id == order_id)

    result = await db.execute(query.order_by(OrderFeedback.created_at.desc()))
    return result.scalars().all()


@router.post("", response_model=FeedbackResponse, status_code=201)
async def create_feedback(
    feedback_data: FeedbackCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Record feedback; one entry per order and user"""
    await get_or_404(db, Order, feedback_data.order_id, "Order")

    feedback = OrderFeedback(**feedback_data.model_dump())
    async with transaction(db, "Create order feedback", "Feedback already exists for this order and user"):
        db.add(feedback)

    logger.info("Feedback recorded", order_id=str(feedback.order_id), rating=feedback.rating)
    return feedback


@router.get("/{feedback_id}", response_model=FeedbackResponse)
async def get_feedback(
    feedback_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, OrderFeedback, feedback_id, "Feedback")


@router.put("/{feedback_id}", response_model=FeedbackResponse)
async def update_feedback(
    feedback_id: UUID,
    feedback_data: FeedbackUpdate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    feedback = await get_or_404(db, OrderFeedback, feedback_id, "Feedback")
    changes = feedback_data.model_dump(exclude_unset=True)

    async with transaction(db, "Update order feedback"):
        for field, value in changes.items():
            setattr(feedback, field, value)
        if "status" in changes:
            feedback.deleted_at = datetime.utcnow() if changes["status"] == "deleted" else None

    return feedback


@router.delete("/{feedback_id}", status_code=204)
async def delete_feedback(
    feedback_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Soft delete; the row is kept with status set to deleted"""
    feedback = await get_or_404(db, OrderFeedback, feedback_id, "Feedback")

    async with transaction(db, "Delete order feedback"):
        feedback.status = "deleted"
        feedback.deleted_at = datetime.utcnow()
