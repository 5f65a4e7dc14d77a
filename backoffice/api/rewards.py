"""Reward points API endpoints"""

from datetime import datetime
from typing import List
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db
from backoffice.models.customer import Reward
from backoffice.models.user import User
from backoffice.schemas.customer import RewardAdjust, RewardCreate, RewardResponse
from backoffice.api.auth import get_current_active_user, require_manager
from backoffice.services.store import get_or_404, transaction

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[RewardResponse])
async def list_rewards(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Reward balances, most recently changed first"""
    result = await db.execute(select(Reward).order_by(Reward.last_updated.desc()))
    return result.scalars().all()


@router.post("", response_model=RewardResponse, status_code=201)
async def create_reward(
    reward_data: RewardCreate,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    reward = Reward(**reward_data.model_dump())
    async with transaction(db, "Create reward", "Customer already has a reward balance"):
        db.add(reward)
    return reward


@router.get("/{reward_id}", response_model=RewardResponse)
async def get_reward(
    reward_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Reward, reward_id, "Reward")


@router.post("/{reward_id}/adjust", response_model=RewardResponse)
async def adjust_reward(
    reward_id: UUID,
    adjustment: RewardAdjust,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    """Add or remove points; the balance never drops below zero"""
    reward = await get_or_404(db, Reward, reward_id, "Reward")
    previous = reward.points

    async with transaction(db, "Adjust reward points"):
        reward.points = max(0, reward.points + adjustment.points_change)
        reward.last_updated = datetime.utcnow()

    logger.info("Reward adjusted", reward_id=str(reward_id), previous=previous, points=reward.points)
    return reward


@router.delete("/{reward_id}", status_code=204)
async def delete_reward(
    reward_id: UUID,
    current_user: User = Depends(require_manager),
    db: AsyncSession = Depends(get_db),
):
    reward = await get_or_404(db, Reward, reward_id, "Reward")
    async with transaction(db, "Delete reward"):
        await db.delete(reward)
