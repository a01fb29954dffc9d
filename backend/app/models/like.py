"""Like model: one-directional interest from one profile in another."""

from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, CheckConstraint, Index, Uuid, func

from app.models.base import Base, UUIDMixin


class Like(UUIDMixin, Base):
    __tablename__ = "likes"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    liked_user_id = Column(Uuid(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "liked_user_id", name="uq_likes_user_liked"),
        CheckConstraint("user_id <> liked_user_id", name="ck_likes_not_self"),
        # Reverse lookup for the mutuality check
        Index("idx_likes_liked_user", "liked_user_id", "user_id"),
    )
