"""Pydantic schemas for the readiness quiz."""

from pydantic import BaseModel, StrictInt


class QuestionRead(BaseModel):
    id: int
    text: str
    dimension: str


class LikertOption(BaseModel):
    value: int
    label: str


class QuestionBank(BaseModel):
    questions: list[QuestionRead]
    options: list[LikertOption]


class QuizSubmission(BaseModel):
    """Answers keyed by question id. Unanswered questions may be omitted.

    Responses must be JSON integers; booleans, strings and floats are rejected.
    """

    answers: dict[int, StrictInt]


class ReadinessInsightsRead(BaseModel):
    strengths: list[str]
    growth_area: str
    growth_score: int


class QuizResult(BaseModel):
    dimension_scores: dict[str, int]
    readiness_score: int
    readiness_label: str
    readiness_description: str
    insights: ReadinessInsightsRead
