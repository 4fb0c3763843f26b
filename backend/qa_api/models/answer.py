"""Answer ORM — persists answers.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database
    - question_id is a plain integer column: no foreign key, no cascade

Design Decisions:
    - No FK on question_id: answers may outlive the question they reference
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from qa_api.db.base import Base


class AnswerRow(Base):
    """Answer entity — content linked by id to a question."""
    __tablename__ = "answers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    question_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True,
    )
