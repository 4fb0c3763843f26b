"""Database Store — Store implementation over the pooled SQLAlchemy engine.

Invariants:
    - Questions are read in id order; offset/limit are passed straight to the query
    - An offset past the end yields [] (never an error)
    - update/delete of an absent id raise QuestionNotFound and commit nothing
    - Every mutation commits before returning (visible to all later reads)
    - Driver failures surface as DatabaseQueryError (via DatabaseSessionManager)

Design Decisions:
    - Full-replace update keyed by the path id: the body's own id is ignored
    - add_answer does not look up question_id (weak reference)
"""

import logging

from sqlalchemy import delete, select

from qa_api.core.domain_types import QuestionId
from qa_api.core.errors import QuestionNotFound
from qa_api.infrastructure.database import DatabaseSessionManager
from qa_api.models.answer import AnswerRow
from qa_api.models.question import QuestionRow
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.question import NewQuestion, Question

logger = logging.getLogger(__name__)


class DatabaseStore:
    """Relational Store reached through a bounded connection pool."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    @classmethod
    def from_url(
        cls, database_url: str, pool_size: int = 5, max_overflow: int = 0,
    ) -> "DatabaseStore":
        return cls(DatabaseSessionManager(
            database_url, pool_size=pool_size, max_overflow=max_overflow,
        ))

    @property
    def manager(self) -> DatabaseSessionManager:
        return self._manager

    async def get_questions(
        self, limit: int | None = None, offset: int = 0,
    ) -> list[Question]:
        query = (
            select(QuestionRow).order_by(QuestionRow.id)
            .limit(limit).offset(offset)
        )
        async with self._manager.session() as db:
            result = await db.execute(query)
            return [Question.model_validate(row) for row in result.scalars()]

    async def add_question(self, new_question: NewQuestion) -> Question:
        row = QuestionRow(
            title=new_question.title,
            content=new_question.content,
            tags=new_question.tags,
        )
        async with self._manager.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            logger.info(f"Question {row.id} added")
            return Question.model_validate(row)

    async def update_question(
        self, question: Question, question_id: QuestionId,
    ) -> Question:
        async with self._manager.session() as db:
            row = await db.get(QuestionRow, question_id)
            if row is None:
                raise QuestionNotFound(question_id)
            row.title = question.title
            row.content = question.content
            row.tags = question.tags
            await db.commit()
            await db.refresh(row)
            return Question.model_validate(row)

    async def delete_question(self, question_id: QuestionId) -> None:
        async with self._manager.session() as db:
            result = await db.execute(
                delete(QuestionRow).where(QuestionRow.id == question_id),
            )
            if result.rowcount == 0:
                await db.rollback()
                raise QuestionNotFound(question_id)
            await db.commit()
            logger.info(f"Question {question_id} deleted")

    async def add_answer(self, new_answer: NewAnswer) -> Answer:
        row = AnswerRow(
            content=new_answer.content, question_id=new_answer.question_id,
        )
        async with self._manager.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            return Answer.model_validate(row)

    async def health_check(self) -> bool:
        return await self._manager.health_check()

    async def close(self) -> None:
        await self._manager.dispose()
