"""Readiness scoring: turns the 40-question quiz into dimension and overall scores.

Each of the five dimensions has eight Likert questions (1 = strongly disagree,
5 = strongly agree). A dimension scores ``sum / (8 * 5) * 10`` and the overall
readiness score is the mean of the five dimension scores, both rounded half-up
to an integer in [0, 10]. Unanswered questions count as 0.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple

from app.services.errors import QuizValidationError


class Question(NamedTuple):
    id: int
    text: str
    dimension: str


DIMENSIONS = ("emotional", "self_awareness", "communication", "stability", "boundaries")

DIMENSION_NAMES = MappingProxyType({
    "emotional": "Emotional Readiness",
    "self_awareness": "Self-Awareness",
    "communication": "Communication",
    "stability": "Stability",
    "boundaries": "Boundaries",
})

QUESTIONS_PER_DIMENSION = 8
LIKERT_MIN = 1
LIKERT_MAX = 5

LIKERT_OPTIONS = (
    (1, "Strongly Disagree"),
    (2, "Disagree"),
    (3, "Neutral"),
    (4, "Agree"),
    (5, "Strongly Agree"),
)

_QUESTION_TEXTS = {
    "emotional": (
        "I feel emotionally available to start something new.",
        "I'm not stuck on my past relationships anymore.",
        "I can handle emotional ups and downs without shutting down.",
        "I'm open to being vulnerable with someone I trust.",
        "I'm not dating just to distract myself from loneliness.",
        "I can manage rejection or disappointment in a healthy way.",
        "I feel stable enough to let someone into my life.",
        "I'm not afraid of developing feelings for someone.",
    ),
    "self_awareness": (
        "I understand my own needs clearly.",
        "I am aware of my relationship patterns.",
        "I take responsibility for my mistakes.",
        "I know what triggers me emotionally.",
        "I'm able to express my needs without guilt.",
        "I understand the type of partner I work best with.",
        "I'm honest with myself about what I truly want.",
        "I'm ready to show up as my authentic self.",
    ),
    "communication": (
        "I can talk about difficult topics without avoiding them.",
        "I express my feelings clearly instead of bottling them up.",
        "I listen actively without interrupting.",
        "I can disagree respectfully.",
        "I can communicate when I need space.",
        "I can communicate when I need closeness.",
        "I'm willing to work through misunderstandings.",
        "I prefer clarity over assumptions.",
    ),
    "stability": (
        "My life is generally stable right now.",
        "I can make time for someone consistently.",
        "My daily routine supports a healthy relationship.",
        "I manage stress well enough to date intentionally.",
        "I'm not overwhelmed by other responsibilities.",
        "I'm emotionally in control most days.",
        "I can balance personal goals and a relationship.",
        "I can offer emotional support without burning out.",
    ),
    "boundaries": (
        "I respect my own boundaries.",
        "I respect other people's boundaries.",
        "I can say \"no\" without guilt.",
        "I can accept \"no\" without feeling rejected.",
        "I don't depend on constant attention to feel secure.",
        "I'm comfortable giving someone space when needed.",
        "I'm comfortable receiving space without fear.",
        "I'm genuinely ready to invest in someone.",
    ),
}

# Ids 1..40, numbered dimension by dimension in DIMENSIONS order
QUESTIONS = tuple(
    Question(id=index * QUESTIONS_PER_DIMENSION + offset + 1, text=text, dimension=dimension)
    for index, dimension in enumerate(DIMENSIONS)
    for offset, text in enumerate(_QUESTION_TEXTS[dimension])
)

QUESTIONS_BY_ID = MappingProxyType({q.id: q for q in QUESTIONS})

# Indexed by overall score 0..10
READINESS_LABELS = (
    "Closed Off",
    "Avoidant",
    "Uncertain",
    "Processing",
    "Slowly Warming Up",
    "Half-Ready",
    "Open but Careful",
    "Ready to Build",
    "Fully Available",
    "Relationship-Oriented",
    "Partnership-Ready",
)

READINESS_DESCRIPTIONS = (
    "You may need more time before dating.",
    "You're keeping distance from connection.",
    "You're questioning if you're ready.",
    "You're working through past experiences.",
    "You're starting to open up.",
    "You're partly ready but cautious.",
    "You're open but taking your time.",
    "You're ready to build something real.",
    "You're emotionally ready and available.",
    "You're prioritizing meaningful relationships.",
    "You're fully ready for partnership.",
)


@dataclass(frozen=True)
class ProfileScores:
    dimensions: Mapping[str, int]
    overall: int
    label: str
    description: str


@dataclass(frozen=True)
class ReadinessInsights:
    strengths: tuple[str, ...]
    growth_area: str
    growth_score: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3), for non-negative values."""
    return int(math.floor(value + 0.5))


def _validate(answers: Mapping[int, int]) -> None:
    for question_id, response in answers.items():
        if question_id not in QUESTIONS_BY_ID:
            raise QuizValidationError(f"Unknown question id: {question_id!r}")
        if isinstance(response, bool) or not isinstance(response, int):
            raise QuizValidationError(f"Response to question {question_id} must be an integer, got {response!r}")
        if not LIKERT_MIN <= response <= LIKERT_MAX:
            raise QuizValidationError(
                f"Response to question {question_id} must be between {LIKERT_MIN} and {LIKERT_MAX}, got {response}"
            )


def dimension_score(answers: Mapping[int, int], dimension: str) -> int:
    total = sum(answers.get(q.id, 0) for q in QUESTIONS if q.dimension == dimension)
    return round_half_up(total / (QUESTIONS_PER_DIMENSION * LIKERT_MAX) * 10)


def compute_scores(answers: Mapping[int, int]) -> ProfileScores:
    """Score a (possibly partial) set of quiz answers.

    Raises QuizValidationError for unknown question ids or out-of-range
    responses; missing answers are scored as 0.
    """
    _validate(answers)

    dimensions = {dimension: dimension_score(answers, dimension) for dimension in DIMENSIONS}
    overall = round_half_up(sum(dimensions.values()) / len(DIMENSIONS))

    return ProfileScores(
        dimensions=MappingProxyType(dimensions),
        overall=overall,
        label=READINESS_LABELS[overall],
        description=READINESS_DESCRIPTIONS[overall],
    )


def readiness_insights(dimensions: Mapping[str, int]) -> ReadinessInsights:
    """Two strongest dimensions and the weakest one, by display name.

    Ties keep question-bank order.
    """
    ranked = sorted(DIMENSIONS, key=lambda d: dimensions.get(d) or 0, reverse=True)
    growth = ranked[-1]
    return ReadinessInsights(
        strengths=tuple(DIMENSION_NAMES[d] for d in ranked[:2]),
        growth_area=DIMENSION_NAMES[growth],
        growth_score=dimensions.get(growth) or 0,
    )


def apply_scores(profile, scores: ProfileScores) -> None:
    """Write quiz results back onto a Profile and mark the quiz as completed."""
    for dimension, score in scores.dimensions.items():
        setattr(profile, f"dimension_{dimension}", score)
    profile.readiness_score = scores.overall
    profile.readiness_label = scores.label
    profile.readiness_description = scores.description
    profile.has_completed_quiz = True
