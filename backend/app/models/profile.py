"""Profile model: user identity plus quiz-derived readiness scores."""

from sqlalchemy import Column, String, Text, Integer, Boolean, CheckConstraint, Index

from app.models.base import Base, TimestampMixin, UUIDMixin

DIMENSION_COLUMNS = (
    "dimension_emotional",
    "dimension_self_awareness",
    "dimension_communication",
    "dimension_stability",
    "dimension_boundaries",
)


def _score_range(column: str) -> CheckConstraint:
    return CheckConstraint(
        f"{column} IS NULL OR ({column} >= 0 AND {column} <= 10)",
        name=f"ck_profiles_{column}_range",
    )


class Profile(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "profiles"

    display_name = Column(String(100))
    age = Column(Integer)
    city = Column(String(100))
    intent = Column(String(50))
    bio = Column(Text)

    # Readiness quiz output (null until the quiz is completed)
    dimension_emotional = Column(Integer)
    dimension_self_awareness = Column(Integer)
    dimension_communication = Column(Integer)
    dimension_stability = Column(Integer)
    dimension_boundaries = Column(Integer)
    readiness_score = Column(Integer)
    readiness_label = Column(String(50))
    readiness_description = Column(String(255))
    has_completed_quiz = Column(Boolean, default=False, server_default="false", nullable=False)

    __table_args__ = (
        *(_score_range(column) for column in DIMENSION_COLUMNS),
        _score_range("readiness_score"),
        Index("idx_profiles_readiness", "readiness_score"),
    )

    @property
    def dimension_scores(self) -> dict[str, int | None]:
        """Dimension scores keyed by dimension name (emotional, self_awareness, ...)."""
        return {column.removeprefix("dimension_"): getattr(self, column) for column in DIMENSION_COLUMNS}
