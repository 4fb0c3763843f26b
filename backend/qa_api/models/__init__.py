"""ORM Models — SQLAlchemy declarative models for questions and answers.

Invariants:
    - All models inherit from Base (db/base.py)
    - No relationship between Answer and Question: the reference is weak

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from qa_api.models.question import QuestionRow  # noqa: F401
from qa_api.models.answer import AnswerRow  # noqa: F401
