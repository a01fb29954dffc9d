"""Candidate feed endpoint."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.models.profile import Profile
from app.dependencies.identity import require_completed_quiz
from app.schemas.profile import ProfileSummary
from app.services.candidate_service import list_candidates

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=list[ProfileSummary])
async def get_candidates(
    profile: Profile = Depends(require_completed_quiz),
    db: AsyncSession = Depends(get_db),
    limit: int | None = Query(None, ge=1, le=100),
):
    """Profiles the acting user can swipe on next."""
    candidates = await db.run_sync(list_candidates, profile.id, limit)
    return [ProfileSummary.model_validate(c) for c in candidates]
