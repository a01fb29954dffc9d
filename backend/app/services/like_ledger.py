"""Like ledger: records directional interest and answers "has A liked B?"."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.like import Like
from app.services.db_errors import is_unique_violation
from app.services.errors import LedgerError

logger = logging.getLogger(__name__)


def record_like(session: Session, user_id: UUID, liked_user_id: UUID) -> None:
    """Insert a like for the ordered pair. Recording the same like twice is a no-op.

    The insert runs in a SAVEPOINT so a duplicate only rolls back itself and the
    caller's transaction stays usable.
    """
    try:
        with session.begin_nested():
            session.add(Like(
                user_id=user_id,
                liked_user_id=liked_user_id,
                created_at=datetime.now(timezone.utc),
            ))
    except IntegrityError as exc:
        if is_unique_violation(exc):
            logger.debug("Like %s -> %s already recorded", user_id, liked_user_id)
            return
        raise LedgerError(f"Could not record like {user_id} -> {liked_user_id}") from exc
    except SQLAlchemyError as exc:
        raise LedgerError(f"Could not record like {user_id} -> {liked_user_id}") from exc


def has_liked(session: Session, user_id: UUID, liked_user_id: UUID) -> bool:
    """Whether ``user_id`` has liked ``liked_user_id`` (direction matters)."""
    try:
        found = session.execute(
            select(Like.id)
            .where(Like.user_id == user_id, Like.liked_user_id == liked_user_id)
            .limit(1)
        ).scalar_one_or_none()
    except SQLAlchemyError as exc:
        raise LedgerError(f"Could not read like {user_id} -> {liked_user_id}") from exc
    return found is not None
