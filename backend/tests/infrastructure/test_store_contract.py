"""Store Contract — every backend honours the same CRUD semantics.

Invariants:
    - get_questions returns at most `limit` items starting at position `offset`
    - An offset past the end yields [] rather than an error
    - update/delete of an absent id raise QuestionNotFound and change nothing
    - Repeating an identical update leaves the same observable state
    - add_answer never checks that question_id exists
    - Concurrent add_answer calls get distinct ids, no lost writes
"""

import asyncio

import pytest

from qa_api.core.domain_types import QuestionId
from qa_api.core.errors import QuestionNotFound
from qa_api.schemas.answer import NewAnswer
from qa_api.schemas.question import NewQuestion, Question


async def _seed(store, count: int) -> list[Question]:
    return [
        await store.add_question(NewQuestion(
            title=f"title {i}", content=f"content {i}", tags=[f"t{i}"],
        ))
        for i in range(count)
    ]


async def test_add_question_assigns_distinct_ids(store):
    seeded = await _seed(store, 3)
    assert len({q.id for q in seeded}) == 3
    assert seeded[0].title == "title 0"
    assert seeded[0].tags == ["t0"]


async def test_add_question_without_tags(store):
    question = await store.add_question(NewQuestion(title="t", content="c"))
    assert question.tags is None
    assert await store.get_questions() == [question]


async def test_get_questions_without_window_returns_all_in_order(store):
    seeded = await _seed(store, 4)
    assert await store.get_questions() == seeded


@pytest.mark.parametrize("limit, offset", [
    (2, 0), (2, 1), (10, 0), (1, 4), (0, 0), (None, 2), (3, 3),
])
async def test_get_questions_window(store, limit, offset):
    seeded = await _seed(store, 5)
    page = await store.get_questions(limit, offset)
    stop = None if limit is None else offset + limit
    assert page == seeded[offset:stop]
    if limit is not None:
        assert len(page) <= limit


async def test_offset_past_end_is_empty(store):
    await _seed(store, 2)
    assert await store.get_questions(10, 50) == []


async def test_update_replaces_whole_record_keyed_by_path_id(store):
    [original] = await _seed(store, 1)
    body = Question(id=12345, title="new", content="new content", tags=None)

    updated = await store.update_question(body, QuestionId(original.id))

    assert updated == Question(
        id=original.id, title="new", content="new content", tags=None,
    )
    assert await store.get_questions() == [updated]


async def test_update_is_idempotent(store):
    [original] = await _seed(store, 1)
    body = Question(id=original.id, title="x", content="y", tags=["z"])

    await store.update_question(body, QuestionId(original.id))
    once = await store.get_questions()
    await store.update_question(body, QuestionId(original.id))

    assert await store.get_questions() == once


async def test_update_absent_question_is_not_found(store):
    await _seed(store, 1)
    body = Question(id=99, title="x", content="y")
    with pytest.raises(QuestionNotFound):
        await store.update_question(body, QuestionId(99))


async def test_delete_question(store):
    seeded = await _seed(store, 2)
    await store.delete_question(QuestionId(seeded[0].id))
    assert await store.get_questions() == seeded[1:]


async def test_delete_absent_question_is_not_found_and_changes_nothing(store):
    seeded = await _seed(store, 2)
    with pytest.raises(QuestionNotFound):
        await store.delete_question(QuestionId(999))
    assert await store.get_questions() == seeded


async def test_delete_twice_fails_the_second_time(store):
    [question] = await _seed(store, 1)
    await store.delete_question(QuestionId(question.id))
    with pytest.raises(QuestionNotFound):
        await store.delete_question(QuestionId(question.id))


async def test_add_answer_assigns_distinct_ids(store):
    first = await store.add_answer(NewAnswer(content="a", question_id=1))
    second = await store.add_answer(NewAnswer(content="b", question_id=1))
    assert first.id != second.id
    assert first.content == "a"


async def test_concurrent_add_answer_ids_are_distinct(store):
    n = 20
    answers = await asyncio.gather(*(
        store.add_answer(NewAnswer(content=f"a{i}", question_id=1))
        for i in range(n)
    ))

    assert len({a.id for a in answers}) == n
    assert {a.content for a in answers} == {f"a{i}" for i in range(n)}


async def test_add_answer_does_not_check_question_exists(store):
    answer = await store.add_answer(NewAnswer(content="orphan", question_id=404))
    assert answer.question_id == 404


async def test_health_check(store):
    assert await store.health_check() is True
