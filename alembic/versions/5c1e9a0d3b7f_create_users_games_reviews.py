"""create users, games and reviews

Revision ID: 5c1e9a0d3b7f
Revises:
Create Date: 2026-10-19 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "5c1e9a0d3b7f"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=False),
    )
    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("genre", sa.String(), nullable=True),
        sa.Column("platform", sa.String(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.CheckConstraint("price >= 0", name="ck_games_price_non_negative"),
    )
    op.create_index("ix_games_title", "games", ["title"])
    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("comment", sa.String(), nullable=True),
        sa.Column("game_id", sa.Integer(), sa.ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_reviews_game_id", "reviews", ["game_id"])
    op.create_index("ix_reviews_user_id", "reviews", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_reviews_user_id", table_name="reviews")
    op.drop_index("ix_reviews_game_id", table_name="reviews")
    op.drop_table("reviews")
    op.drop_index("ix_games_title", table_name="games")
    op.drop_table("games")
    op.drop_table("users")
