"""Pydantic schemas for Match model and swipe outcomes."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from app.schemas.profile import ProfileSummary


class MatchRead(BaseModel):
    """Canonical match row (user_a_id < user_b_id)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_a_id: UUID
    user_b_id: UUID
    created_at: datetime


class MatchWithProfile(MatchRead):
    """Match as seen by one member, with the counterpart's profile."""

    other_user: ProfileSummary | None = None


class SwipeResultRead(BaseModel):
    matched: bool
    is_new: bool
    match: MatchRead | None = None
