"""Swipe service: turns positive swipes into likes and mutual likes into matches."""

import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.models.match import Match
from app.services.errors import LedgerError, SwipeError
from app.services.like_ledger import record_like, has_liked
from app.services.match_registry import get_or_create_match

logger = logging.getLogger(__name__)


class SwipeState(str, enum.Enum):
    IDLE = "idle"
    LIKE_RECORDED = "like_recorded"
    MUTUALITY_CHECKED = "mutuality_checked"
    MATCH_RESOLVED = "match_resolved"
    NO_MATCH = "no_match"


@dataclass
class SwipeResult:
    matched: bool = False
    is_new: bool = False
    match: Match | None = None
    state: SwipeState = SwipeState.IDLE


def is_fresh_match(match: Match, now: datetime | None = None, window: float | None = None) -> bool:
    """Whether the match was created less than ``window`` seconds before ``now``.

    get_or_create_match does not say whether it created the row, so a match
    younger than the window is treated as newly formed. Under clock skew or a
    slow insert this can misreport; both sides of a race may see it as new.
    """
    if window is None:
        window = get_settings().match_fresh_window_seconds
    if now is None:
        now = datetime.now(timezone.utc)

    created_at = match.created_at
    if created_at.tzinfo is None:
        # Stores without timezone support hand back naive UTC
        created_at = created_at.replace(tzinfo=timezone.utc)

    return now - created_at < timedelta(seconds=window)


def swipe_right(session: Session, actor_id: UUID, target_id: UUID, now: datetime | None = None) -> SwipeResult:
    """Record that ``actor_id`` likes ``target_id`` and resolve a match if the like is mutual.

    The like is committed on its own before the reverse like is checked, so
    the session's transaction ends here. LedgerError and RegistryError
    propagate; the whole call is safe to replay.
    """
    if actor_id == target_id:
        raise SwipeError(f"Profile {actor_id} cannot swipe on itself")

    result = SwipeResult()

    record_like(session, actor_id, target_id)
    try:
        # The like must be committed before the mutuality check; a concurrent
        # reverse swipe only sees committed likes.
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise LedgerError(f"Could not commit like {actor_id} -> {target_id}") from e
    result.state = SwipeState.LIKE_RECORDED

    mutual = has_liked(session, target_id, actor_id)
    result.state = SwipeState.MUTUALITY_CHECKED

    if not mutual:
        result.state = SwipeState.NO_MATCH
        return result

    match = get_or_create_match(session, actor_id, target_id)
    result.matched = True
    result.match = match
    result.is_new = is_fresh_match(match, now=now)
    result.state = SwipeState.MATCH_RESOLVED

    if result.is_new:
        logger.info("New match %s formed by %s liking %s", match.id, actor_id, target_id)
    return result


def swipe_left(session: Session, actor_id: UUID, target_id: UUID) -> SwipeResult:
    """Pass on a candidate. Nothing is recorded."""
    logger.debug("Profile %s passed on %s", actor_id, target_id)
    return SwipeResult(state=SwipeState.NO_MATCH)
