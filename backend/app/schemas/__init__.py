"""Pydantic schemas package."""

from app.schemas.profile import (
    ProfileBase,
    ProfileCreate,
    ProfileRead,
    ProfileSummary,
)
from app.schemas.quiz import (
    QuestionRead,
    LikertOption,
    QuestionBank,
    QuizSubmission,
    ReadinessInsightsRead,
    QuizResult,
)
from app.schemas.match import (
    MatchRead,
    MatchWithProfile,
    SwipeResultRead,
)

# Rebuild models to resolve forward references
MatchWithProfile.model_rebuild()

__all__ = [
    # Profile
    "ProfileBase",
    "ProfileCreate",
    "ProfileRead",
    "ProfileSummary",
    # Quiz
    "QuestionRead",
    "LikertOption",
    "QuestionBank",
    "QuizSubmission",
    "ReadinessInsightsRead",
    "QuizResult",
    # Match
    "MatchRead",
    "MatchWithProfile",
    "SwipeResultRead",
]
