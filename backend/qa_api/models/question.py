"""Question ORM — persists questions.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database
    - title and content are non-nullable text
    - tags is an ordered list of strings, or NULL

Design Decisions:
    - JSON column for tags: portable across PostgreSQL and SQLite test databases
"""

from sqlalchemy import Integer, String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from qa_api.db.base import Base


class QuestionRow(Base):
    """Question entity."""
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
