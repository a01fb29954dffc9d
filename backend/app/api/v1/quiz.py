"""Readiness quiz API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.models.profile import Profile
from app.dependencies.identity import require_profile
from app.schemas.quiz import (
    QuestionBank,
    QuestionRead,
    LikertOption,
    QuizSubmission,
    QuizResult,
    ReadinessInsightsRead,
)
from app.services.errors import QuizValidationError
from app.services.readiness_scoring import (
    QUESTIONS,
    LIKERT_OPTIONS,
    compute_scores,
    readiness_insights,
    apply_scores,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.get("/questions", response_model=QuestionBank)
async def get_questions():
    """The 40 readiness questions and the Likert scale they are answered on."""
    return QuestionBank(
        questions=[QuestionRead(**q._asdict()) for q in QUESTIONS],
        options=[LikertOption(value=value, label=label) for value, label in LIKERT_OPTIONS],
    )


@router.post("", response_model=QuizResult)
async def submit_quiz(
    submission: QuizSubmission,
    profile: Profile = Depends(require_profile),
    db: AsyncSession = Depends(get_db),
):
    """Score the submitted answers and store the result on the acting profile."""
    try:
        scores = compute_scores(submission.answers)
    except QuizValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    apply_scores(profile, scores)
    await db.flush()
    logger.info("Profile %s completed the quiz with readiness %d", profile.id, scores.overall)

    insights = readiness_insights(scores.dimensions)
    return QuizResult(
        dimension_scores=dict(scores.dimensions),
        readiness_score=scores.overall,
        readiness_label=scores.label,
        readiness_description=scores.description,
        insights=ReadinessInsightsRead(
            strengths=list(insights.strengths),
            growth_area=insights.growth_area,
            growth_score=insights.growth_score,
        ),
    )
