import random

import pytest

from app.models.profile import Profile
from app.services.errors import QuizValidationError
from app.services.readiness_scoring import (
    DIMENSIONS,
    QUESTIONS,
    READINESS_LABELS,
    READINESS_DESCRIPTIONS,
    apply_scores,
    compute_scores,
    readiness_insights,
    round_half_up,
)


def _answers(value):
    return {q.id: value for q in QUESTIONS}


def test_question_bank_shape():
    assert len(QUESTIONS) == 40
    assert [q.id for q in QUESTIONS] == list(range(1, 41))
    for dimension in DIMENSIONS:
        assert sum(1 for q in QUESTIONS if q.dimension == dimension) == 8
    assert QUESTIONS[0].dimension == "emotional"
    assert QUESTIONS[-1].dimension == "boundaries"
    assert len(READINESS_LABELS) == len(READINESS_DESCRIPTIONS) == 11


def test_all_strongly_agree_is_partnership_ready():
    scores = compute_scores(_answers(5))
    assert dict(scores.dimensions) == {d: 10 for d in DIMENSIONS}
    assert scores.overall == 10
    assert scores.label == "Partnership-Ready"
    assert scores.description == "You're fully ready for partnership."


def test_all_strongly_disagree_is_uncertain():
    scores = compute_scores(_answers(1))
    assert dict(scores.dimensions) == {d: 2 for d in DIMENSIONS}
    assert scores.overall == 2
    assert scores.label == "Uncertain"


def test_missing_answers_count_as_zero():
    scores = compute_scores({})
    assert dict(scores.dimensions) == {d: 0 for d in DIMENSIONS}
    assert scores.overall == 0
    assert scores.label == "Closed Off"


def test_partially_answered_dimension():
    # Only the emotional block answered with 5s: 40/40 -> 10, the rest 0
    answers = {q.id: 5 for q in QUESTIONS if q.dimension == "emotional"}
    scores = compute_scores(answers)
    assert scores.dimensions["emotional"] == 10
    assert scores.dimensions["boundaries"] == 0
    assert scores.overall == 2


def test_rounding_is_half_up():
    # Emotional answers sum to 10 -> 10/40*10 = 2.5 -> 3
    emotional = [q.id for q in QUESTIONS if q.dimension == "emotional"]
    answers = {qid: 1 for qid in emotional}
    answers[emotional[0]] = 2
    answers[emotional[1]] = 2
    scores = compute_scores(answers)
    assert scores.dimensions["emotional"] == 3
    assert round_half_up(2.5) == 3
    assert round_half_up(7.5) == 8
    assert round_half_up(2.4) == 2


def test_overall_is_rounded_mean_of_dimensions():
    # Dimension sums 40, 40, 24, 24, 24 -> 10, 10, 6, 6, 6 -> mean 7.6 -> 8
    answers = {}
    for q in QUESTIONS:
        answers[q.id] = 5 if q.dimension in ("emotional", "self_awareness") else 3
    scores = compute_scores(answers)
    assert [scores.dimensions[d] for d in DIMENSIONS] == [10, 10, 6, 6, 6]
    assert scores.overall == 8
    assert scores.label == "Fully Available"


@pytest.mark.parametrize("question_id", [0, 41, -3])
def test_unknown_question_id_is_rejected(question_id):
    with pytest.raises(QuizValidationError):
        compute_scores({question_id: 3})


@pytest.mark.parametrize("response", [0, 6, True, 2.5, "4"])
def test_invalid_response_is_rejected(response):
    with pytest.raises(QuizValidationError):
        compute_scores({1: response})


def test_scoring_is_deterministic_and_bounded():
    rng = random.Random(1234)
    for _ in range(50):
        answers = {q.id: rng.randint(1, 5) for q in QUESTIONS if rng.random() > 0.1}
        first = compute_scores(answers)
        second = compute_scores(dict(answers))
        assert first == second
        for score in (*first.dimensions.values(), first.overall):
            assert isinstance(score, int)
            assert 0 <= score <= 10
        assert first.label == READINESS_LABELS[first.overall]


def test_scores_are_read_only():
    scores = compute_scores(_answers(4))
    with pytest.raises(TypeError):
        scores.dimensions["emotional"] = 0


def test_readiness_insights():
    insights = readiness_insights({
        "emotional": 6,
        "self_awareness": 9,
        "communication": 4,
        "stability": 9,
        "boundaries": 7,
    })
    assert insights.strengths == ("Self-Awareness", "Stability")
    assert insights.growth_area == "Communication"
    assert insights.growth_score == 4


def test_readiness_insights_ties_keep_bank_order():
    insights = readiness_insights({d: 5 for d in DIMENSIONS})
    assert insights.strengths == ("Emotional Readiness", "Self-Awareness")
    assert insights.growth_area == "Boundaries"


def test_apply_scores_marks_quiz_completed():
    profile = Profile()
    apply_scores(profile, compute_scores(_answers(5)))
    assert profile.has_completed_quiz is True
    assert profile.readiness_score == 10
    assert profile.readiness_label == "Partnership-Ready"
    assert profile.dimension_scores == {d: 10 for d in DIMENSIONS}
