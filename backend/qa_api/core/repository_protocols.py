"""Boundary Protocols — the Store contract between route handlers and persistence.

Invariants:
    - Route handlers depend on Store only, never on a concrete backend
    - Every failure is raised as a member of core/errors.py — never a driver exception
    - get_questions never raises for an out-of-range window; it returns []

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO (database) or await locks (memory)
"""

from typing import Protocol

from qa_api.core.domain_types import QuestionId
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.question import NewQuestion, Question


class Store(Protocol):
    """Contract for question/answer persistence — implemented by infrastructure/."""

    async def get_questions(
        self, limit: int | None = None, offset: int = 0,
    ) -> list[Question]: ...

    async def add_question(self, new_question: NewQuestion) -> Question: ...

    async def update_question(
        self, question: Question, question_id: QuestionId,
    ) -> Question: ...

    async def delete_question(self, question_id: QuestionId) -> None: ...

    async def add_answer(self, new_answer: NewAnswer) -> Answer: ...

    async def health_check(self) -> bool: ...

    async def close(self) -> None: ...
