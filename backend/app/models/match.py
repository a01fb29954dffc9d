"""Match model: canonical record of mutual interest between two profiles."""

import uuid
from dataclasses import dataclass

from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, CheckConstraint, Index, Uuid, func
from sqlalchemy.orm import relationship

from app.models.base import Base, UUIDMixin
from app.models.profile import Profile  # noqa: F401


@dataclass(frozen=True)
class MatchPair:
    """Unordered pair of profile ids stored in canonical (smaller, larger) order."""

    user_a_id: uuid.UUID
    user_b_id: uuid.UUID

    def __post_init__(self):
        if not self.user_a_id < self.user_b_id:
            raise ValueError(f"Pair is not canonical: {self.user_a_id} !< {self.user_b_id}")

    @classmethod
    def of(cls, user_id_1: uuid.UUID, user_id_2: uuid.UUID) -> "MatchPair":
        if user_id_1 == user_id_2:
            raise ValueError(f"A profile cannot be paired with itself: {user_id_1}")
        return cls(min(user_id_1, user_id_2), max(user_id_1, user_id_2))

    def __contains__(self, user_id) -> bool:
        return user_id == self.user_a_id or user_id == self.user_b_id

    def other_of(self, known_id: uuid.UUID) -> uuid.UUID:
        """Return the member of the pair that is not ``known_id``.

        Asking for the counterpart of a profile outside the pair is a caller bug,
        so it raises instead of returning None.
        """
        if known_id == self.user_a_id:
            return self.user_b_id
        if known_id == self.user_b_id:
            return self.user_a_id
        raise ValueError(f"{known_id} is not a member of pair ({self.user_a_id}, {self.user_b_id})")


class Match(UUIDMixin, Base):
    __tablename__ = "matches"

    user_a_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    user_b_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    user_a = relationship("Profile", foreign_keys=[user_a_id])
    user_b = relationship("Profile", foreign_keys=[user_b_id])

    __table_args__ = (
        # Canonical ordering turns the ordered unique constraint into an unordered one
        UniqueConstraint("user_a_id", "user_b_id", name="uq_matches_pair"),
        CheckConstraint("user_a_id < user_b_id", name="ck_matches_canonical_order"),
        Index("idx_matches_user_b", "user_b_id"),
    )

    @property
    def pair(self) -> MatchPair:
        # Legacy rows may be stored reversed; normalise on read.
        return MatchPair.of(self.user_a_id, self.user_b_id)

    def other_user_id(self, known_id: uuid.UUID) -> uuid.UUID:
        return self.pair.other_of(known_id)
