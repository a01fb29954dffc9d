"""Pydantic schemas for Profile model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileBase(BaseModel):
    """Descriptive profile fields."""

    display_name: str | None = Field(None, max_length=100)
    age: int | None = Field(None, ge=18, le=120)
    city: str | None = Field(None, max_length=100)
    intent: str | None = Field(None, max_length=50)
    bio: str | None = None


class ProfileCreate(ProfileBase):
    """Fields for registering a profile. ``id`` is the identity provider's user id."""

    id: UUID | None = None


class ProfileRead(ProfileBase):
    """Full profile output including readiness state."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    dimension_scores: dict[str, int | None]
    readiness_score: int | None = None
    readiness_label: str | None = None
    readiness_description: str | None = None
    has_completed_quiz: bool
    created_at: datetime


class ProfileSummary(BaseModel):
    """Minimal profile info for candidate and match lists."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    display_name: str | None = None
    age: int | None = None
    city: str | None = None
    intent: str | None = None
    readiness_score: int | None = None
    readiness_label: str | None = None
