"""Acting-profile dependencies for FastAPI routes.

Authentication happens upstream (gateway / identity provider); requests reach
this service with the authenticated user's id in the ``X-User-Id`` header.
"""

from uuid import UUID

from fastapi import Depends, Header, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.models.profile import Profile


async def get_current_profile(
    x_user_id: UUID | None = Header(None),
    db: AsyncSession = Depends(get_db),
) -> Profile | None:
    """Return the acting profile or None."""
    if not x_user_id:
        return None
    result = await db.execute(select(Profile).where(Profile.id == x_user_id))
    return result.scalar_one_or_none()


async def require_profile(profile: Profile | None = Depends(get_current_profile)) -> Profile:
    """Return the acting profile or raise 401."""
    if not profile:
        raise HTTPException(status_code=401, detail="Unknown or missing user")
    return profile


async def require_completed_quiz(profile: Profile = Depends(require_profile)) -> Profile:
    """Return the acting profile, or raise 409 if the readiness quiz is still pending."""
    if not profile.has_completed_quiz:
        raise HTTPException(status_code=409, detail="Complete the readiness quiz first")
    return profile
