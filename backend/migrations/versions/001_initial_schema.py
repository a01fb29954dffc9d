"""Initial schema: profiles, likes, matches.

Creates:
- profiles: user identity plus readiness quiz scores
- likes: directional interest, unique per ordered pair
- matches: mutual interest, unique per canonical (user_a_id < user_b_id) pair

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DIMENSION_COLUMNS = (
    "dimension_emotional",
    "dimension_self_awareness",
    "dimension_communication",
    "dimension_stability",
    "dimension_boundaries",
)


def upgrade() -> None:
    # 1. profiles
    op.create_table(
        "profiles",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("display_name", sa.String(100)),
        sa.Column("age", sa.Integer),
        sa.Column("city", sa.String(100)),
        sa.Column("intent", sa.String(50)),
        sa.Column("bio", sa.Text),
        *(sa.Column(column, sa.Integer) for column in DIMENSION_COLUMNS),
        sa.Column("readiness_score", sa.Integer),
        sa.Column("readiness_label", sa.String(50)),
        sa.Column("readiness_description", sa.String(255)),
        sa.Column("has_completed_quiz", sa.Boolean, server_default=sa.text("false"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        *(
            sa.CheckConstraint(
                f"{column} IS NULL OR ({column} >= 0 AND {column} <= 10)",
                name=f"ck_profiles_{column}_range",
            )
            for column in (*DIMENSION_COLUMNS, "readiness_score")
        ),
    )
    op.create_index("idx_profiles_readiness", "profiles", ["readiness_score"])

    # 2. likes
    op.create_table(
        "likes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("liked_user_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_id", "liked_user_id", name="uq_likes_user_liked"),
        sa.CheckConstraint("user_id <> liked_user_id", name="ck_likes_not_self"),
    )
    op.create_index("idx_likes_liked_user", "likes", ["liked_user_id", "user_id"])

    # 3. matches
    op.create_table(
        "matches",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_a_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_b_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_a_id", "user_b_id", name="uq_matches_pair"),
        sa.CheckConstraint("user_a_id < user_b_id", name="ck_matches_canonical_order"),
    )
    op.create_index("idx_matches_user_b", "matches", ["user_b_id"])


def downgrade() -> None:
    op.drop_table("matches")
    op.drop_table("likes")
    op.drop_table("profiles")
