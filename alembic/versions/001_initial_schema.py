"""Initial schema — feedback and response tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "feedback",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("quiz_id", sa.String(64), nullable=False),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("question_number", sa.Integer, nullable=False),
        sa.Column("difficulty_rating", sa.Integer, nullable=False),
        sa.Column("message", sa.Text, nullable=True),
    )
    op.create_index("ix_feedback_quiz_id", "feedback", ["quiz_id"])
    op.create_index("ix_feedback_username", "feedback", ["username"])
    op.create_index(
        "ix_feedback_quiz_question", "feedback", ["quiz_id", "question_number"],
    )

    op.create_table(
        "response",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("quiz_id", sa.String(64), nullable=False),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("question_number", sa.Integer, nullable=False),
        sa.Column("value", sa.String(1000), nullable=False),
        sa.Column("score", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("ix_response_quiz_id", "response", ["quiz_id"])
    op.create_index("ix_response_username", "response", ["username"])
    op.create_index(
        "ix_response_quiz_question", "response", ["quiz_id", "question_number"],
    )


def downgrade() -> None:
    op.drop_table("response")
    op.drop_table("feedback")
