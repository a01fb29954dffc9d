"""Candidate service: who a profile can be shown next. Filtering only, no ranking."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.config import get_settings
from app.models.like import Like
from app.models.profile import Profile


def list_candidates(session: Session, user_id: UUID, limit: int | None = None) -> list[Profile]:
    """Profiles other than ``user_id`` that are ready enough to be shown and not already liked."""
    settings = get_settings()
    if limit is None:
        limit = settings.candidate_limit

    already_liked = select(Like.liked_user_id).where(Like.user_id == user_id)

    return list(session.execute(
        select(Profile)
        .where(
            Profile.id != user_id,
            Profile.readiness_score.is_not(None),
            Profile.readiness_score >= settings.min_candidate_readiness,
            Profile.id.not_in(already_liked),
        )
        .order_by(Profile.created_at.desc())
        .limit(limit)
    ).scalars().all())
