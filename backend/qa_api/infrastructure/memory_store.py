"""In-Memory Store — Store implementation over process-local dictionaries.

Invariants:
    - One RWLock per collection (questions, answers), never one global lock
    - Questions are kept in insertion order; limit/offset slice that order
    - An offset past the end yields [] (same policy as DatabaseStore)
    - Answer ids derive from the answer count under the write lock: distinct, no lost writes
    - Question ids come from a monotonic counter: never reused after a delete
    - Returned records are copies; callers cannot mutate stored state

Design Decisions:
    - Nothing survives a restart (ADR: dev/test backend, STORE_BACKEND=memory)
"""

import logging

from qa_api.core.domain_types import AnswerId, QuestionId
from qa_api.core.errors import QuestionNotFound
from qa_api.infrastructure.rwlock import RWLock
from qa_api.schemas.answer import Answer, NewAnswer
from qa_api.schemas.question import NewQuestion, Question

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Dictionary-backed Store with a reader/writer lock per collection."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._answers: dict[AnswerId, Answer] = {}
        self._questions_lock = RWLock()
        self._answers_lock = RWLock()
        self._last_question_id = 0

    async def get_questions(
        self, limit: int | None = None, offset: int = 0,
    ) -> list[Question]:
        async with self._questions_lock.read():
            questions = list(self._questions.values())
        stop = None if limit is None else offset + limit
        return [q.model_copy(deep=True) for q in questions[offset:stop]]

    async def add_question(self, new_question: NewQuestion) -> Question:
        async with self._questions_lock.write():
            self._last_question_id += 1
            question = Question(
                id=self._last_question_id, **new_question.model_dump(),
            )
            self._questions[QuestionId(question.id)] = question
        logger.info(f"Question {question.id} added")
        return question.model_copy(deep=True)

    async def update_question(
        self, question: Question, question_id: QuestionId,
    ) -> Question:
        async with self._questions_lock.write():
            if question_id not in self._questions:
                raise QuestionNotFound(question_id)
            stored = question.model_copy(update={"id": question_id}, deep=True)
            self._questions[question_id] = stored
        return stored.model_copy(deep=True)

    async def delete_question(self, question_id: QuestionId) -> None:
        async with self._questions_lock.write():
            if question_id not in self._questions:
                raise QuestionNotFound(question_id)
            del self._questions[question_id]
        logger.info(f"Question {question_id} deleted")

    async def add_answer(self, new_answer: NewAnswer) -> Answer:
        async with self._answers_lock.write():
            answer = Answer(
                id=len(self._answers) + 1, **new_answer.model_dump(),
            )
            self._answers[AnswerId(answer.id)] = answer
        return answer.model_copy()

    async def get_answers(self) -> list[Answer]:
        async with self._answers_lock.read():
            return [a.model_copy() for a in self._answers.values()]

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        return None
