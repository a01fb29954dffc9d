"""Celery tasks for match bookkeeping."""

import logging

from app.config import get_settings
from app.tasks.celery_app import celery_app
from app.models.base import SyncSessionLocal
from app.models.profile import Profile  # noqa: F401
from app.models.like import Like  # noqa: F401
from app.models.match import Match  # noqa: F401
from app.services.errors import RegistryError
from app.services.match_registry import find_unmatched_mutual_likes, get_or_create_match

logger = logging.getLogger(__name__)


@celery_app.task(name="app.tasks.match_tasks.reconcile_mutual_likes")
def reconcile_mutual_likes(batch_size: int | None = None):
    """Create the missing match for mutual likes whose swipe never got that far.

    A swipe can record its like and then fail before the match step; replaying
    get_or_create_match here is safe because it is idempotent. Each pair runs
    in its own savepoint, so a pair that keeps failing is skipped without
    holding back the rest of the batch.
    """
    if batch_size is None:
        batch_size = get_settings().reconcile_batch_size

    with SyncSessionLocal() as session:
        try:
            pairs = find_unmatched_mutual_likes(session, limit=batch_size)
            reconciled = 0
            failed = 0

            for pair in pairs:
                try:
                    with session.begin_nested():
                        get_or_create_match(session, pair.user_a_id, pair.user_b_id)
                    reconciled += 1
                except RegistryError as e:
                    logger.warning(
                        "Could not reconcile match for %s and %s: %s",
                        pair.user_a_id, pair.user_b_id, e,
                    )
                    failed += 1

            session.commit()
            if pairs:
                logger.info("Reconciled %d mutual likes without a match, %d failed", reconciled, failed)
            return {"reconciled": reconciled, "failed": failed}

        except Exception:
            session.rollback()
            logger.exception("Failed to reconcile mutual likes")
            raise
