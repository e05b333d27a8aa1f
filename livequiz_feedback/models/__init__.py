"""ORM Models — SQLAlchemy declarative tables for feedback and responses.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are keyed by integer autoincrement ids assigned on insert

Design Decisions:
    - One file per table; imported here so Base.metadata is complete
"""

from livequiz_feedback.models.feedback import Feedback  # noqa: F401
from livequiz_feedback.models.quiz_response import QuizResponse  # noqa: F401
