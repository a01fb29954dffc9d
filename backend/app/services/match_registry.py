"""Match registry: at most one match row per unordered pair of profiles.

``get_or_create_match`` is a lookup followed by an optimistic insert. The
unique constraint on the canonical pair is the arbiter when two requests race:
the loser's insert fails with a unique violation, its SAVEPOINT is rolled back
and it reads back the winner's row. No application-level locks are taken.
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, or_, and_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from app.models.like import Like
from app.models.match import Match, MatchPair
from app.services.db_errors import is_unique_violation
from app.services.errors import RegistryError

logger = logging.getLogger(__name__)

__all__ = [
    "MatchPair",
    "find_match",
    "get_or_create_match",
    "find_unmatched_mutual_likes",
    "list_matches_for",
]


def _pair_filter(pair: MatchPair):
    # Either orientation, in case older rows were not stored canonically
    return or_(
        and_(Match.user_a_id == pair.user_a_id, Match.user_b_id == pair.user_b_id),
        and_(Match.user_a_id == pair.user_b_id, Match.user_b_id == pair.user_a_id),
    )


def _lookup(session: Session, pair: MatchPair) -> Match | None:
    try:
        return session.execute(
            select(Match).where(_pair_filter(pair)).order_by(Match.created_at.asc()).limit(1)
        ).scalar_one_or_none()
    except SQLAlchemyError as exc:
        raise RegistryError(f"Could not look up match for {pair}") from exc


def find_match(session: Session, user_id_1: UUID, user_id_2: UUID) -> Match | None:
    """Return the match between two profiles, in whichever order they are given."""
    return _lookup(session, MatchPair.of(user_id_1, user_id_2))


def get_or_create_match(session: Session, user_id_1: UUID, user_id_2: UUID) -> Match:
    """Return the single match for the pair, creating it if it does not exist yet.

    Every concurrent caller for the same pair gets the same row back. A unique
    violation on insert triggers exactly one re-read; any other failure is
    raised as RegistryError.
    """
    pair = MatchPair.of(user_id_1, user_id_2)

    existing = _lookup(session, pair)
    if existing is not None:
        return existing

    match = Match(
        user_a_id=pair.user_a_id,
        user_b_id=pair.user_b_id,
        created_at=datetime.now(timezone.utc),
    )
    try:
        with session.begin_nested():
            session.add(match)
    except IntegrityError as exc:
        if not is_unique_violation(exc):
            raise RegistryError(f"Could not create match for {pair}") from exc

        logger.info("Match insert for %s lost a race, reading back existing row", pair)
        winner = _lookup(session, pair)
        if winner is None:
            raise RegistryError(f"Match for {pair} conflicted on insert but could not be read back") from exc
        return winner
    except SQLAlchemyError as exc:
        raise RegistryError(f"Could not create match for {pair}") from exc

    logger.info("Created match %s between %s and %s", match.id, pair.user_a_id, pair.user_b_id)
    return match


def find_unmatched_mutual_likes(session: Session, limit: int) -> list[MatchPair]:
    """Mutual likes that have no match row yet, e.g. a swipe whose match step failed."""
    forward = aliased(Like)
    reverse = aliased(Like)
    existing = select(Match.id).where(or_(
        and_(Match.user_a_id == forward.user_id, Match.user_b_id == forward.liked_user_id),
        and_(Match.user_a_id == forward.liked_user_id, Match.user_b_id == forward.user_id),
    ))

    rows = session.execute(
        select(forward.user_id, forward.liked_user_id)
        .join(reverse, and_(
            reverse.user_id == forward.liked_user_id,
            reverse.liked_user_id == forward.user_id,
        ))
        # Each mutual pair appears twice; keep the canonical orientation
        .where(forward.user_id < forward.liked_user_id)
        .where(~existing.exists())
        .limit(limit)
    ).all()
    return [MatchPair(user_a_id=a, user_b_id=b) for a, b in rows]


def list_matches_for(session: Session, user_id: UUID) -> list[Match]:
    """All matches involving ``user_id``, newest first, one per counterpart."""
    try:
        rows = session.execute(
            select(Match)
            .where(or_(Match.user_a_id == user_id, Match.user_b_id == user_id))
            .order_by(Match.created_at.desc())
        ).scalars().all()
    except SQLAlchemyError as exc:
        raise RegistryError(f"Could not list matches for {user_id}") from exc

    seen = set()
    matches = []
    for match in rows:
        other = match.other_user_id(user_id)
        if other in seen:
            continue
        seen.add(other)
        matches.append(match)
    return matches
