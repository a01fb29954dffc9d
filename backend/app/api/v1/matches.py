"""Match list endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.models.profile import Profile
from app.dependencies.identity import require_profile
from app.schemas.match import MatchRead, MatchWithProfile
from app.schemas.profile import ProfileSummary
from app.services.match_registry import list_matches_for

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("", response_model=list[MatchWithProfile])
async def list_matches(
    profile: Profile = Depends(require_profile),
    db: AsyncSession = Depends(get_db),
):
    """The acting user's matches, newest first, with the other member's profile."""
    matches = await db.run_sync(list_matches_for, profile.id)

    other_ids = [m.other_user_id(profile.id) for m in matches]
    others = {}
    if other_ids:
        result = await db.execute(select(Profile).where(Profile.id.in_(other_ids)))
        others = {p.id: p for p in result.scalars().all()}

    response = []
    for match in matches:
        other = others.get(match.other_user_id(profile.id))
        response.append(MatchWithProfile(
            **MatchRead.model_validate(match).model_dump(),
            other_user=ProfileSummary.model_validate(other) if other else None,
        ))
    return response
