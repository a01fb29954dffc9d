"""Swipe endpoints: like (right) or pass (left) on a candidate."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.models.profile import Profile
from app.dependencies.identity import require_completed_quiz
from app.schemas.match import MatchRead, SwipeResultRead
from app.services.errors import LedgerError, RegistryError, SwipeError
from app.services.swipe_service import SwipeResult, swipe_right, swipe_left

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/swipes", tags=["swipes"])


async def _require_target(db: AsyncSession, target_id: UUID) -> None:
    result = await db.execute(select(Profile.id).where(Profile.id == target_id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="Profile not found")


def _to_response(result: SwipeResult) -> SwipeResultRead:
    return SwipeResultRead(
        matched=result.matched,
        is_new=result.is_new,
        match=MatchRead.model_validate(result.match) if result.match else None,
    )


@router.post("/{target_id}/right", response_model=SwipeResultRead)
async def like_profile(
    target_id: UUID,
    profile: Profile = Depends(require_completed_quiz),
    db: AsyncSession = Depends(get_db),
):
    """Like a profile. Reports whether this formed a match and whether the match is new."""
    if target_id == profile.id:
        raise HTTPException(status_code=400, detail="Cannot swipe on your own profile")
    await _require_target(db, target_id)

    try:
        result = await db.run_sync(swipe_right, profile.id, target_id)
    except (LedgerError, RegistryError) as e:
        logger.warning("Swipe %s -> %s failed: %s", profile.id, target_id, e)
        raise HTTPException(status_code=503, detail="Could not record swipe, please retry")
    except SwipeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(result)


@router.post("/{target_id}/left", response_model=SwipeResultRead)
async def pass_profile(
    target_id: UUID,
    profile: Profile = Depends(require_completed_quiz),
    db: AsyncSession = Depends(get_db),
):
    """Pass on a profile. Nothing is stored."""
    result = await db.run_sync(swipe_left, profile.id, target_id)
    return _to_response(result)
