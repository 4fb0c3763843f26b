"""Questions — list, create, replace and delete questions.

Invariants:
    - GET /questions enforces exactly one pagination policy (settings.pagination_style)
    - Parameter-shape errors are raised before the Store is touched
    - Range bounds (end > count) are checked against the same single read that is sliced
    - Path ids above 2**31-1 never reach the Store (route-level 404)
    - Store errors propagate untouched to the Response Mapper

Design Decisions:
    - Query parameters read raw (request.query_params), not as typed Query(...)
      arguments: the Pagination Extractor owns their validation and error kinds
"""

import logging

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import PlainTextResponse

from qa_api.api.dependencies import get_store
from qa_api.config import Settings, get_settings
from qa_api.core.domain_types import PaginationStyle, QuestionId
from qa_api.core.pagination import (
    MAX_PARAMETER, check_range_bounds, extract_pagination, extract_range,
)
from qa_api.core.repository_protocols import Store
from qa_api.schemas.question import NewQuestion, Question

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/questions", tags=["questions"])


async def _page_by_offset(params: dict[str, str], store: Store) -> list[Question]:
    pagination = extract_pagination(params)
    logger.info(
        "querying questions", extra={"pagination": pagination.limit is not None},
    )
    return await store.get_questions(pagination.limit, pagination.offset)


async def _page_by_range(params: dict[str, str], store: Store) -> list[Question]:
    index_range = extract_range(params)
    logger.info("querying questions", extra={"pagination": index_range is not None})
    questions = await store.get_questions()
    if index_range is None:
        return questions
    check_range_bounds(index_range, len(questions))
    return questions[index_range.start:index_range.end]


@router.get("", response_model=list[Question])
async def get_questions(
    request: Request,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """List questions, optionally paginated."""
    params = dict(request.query_params)
    if settings.pagination_style == PaginationStyle.RANGE:
        return await _page_by_range(params, store)
    return await _page_by_offset(params, store)


@router.post("", response_class=PlainTextResponse)
async def add_question(
    body: NewQuestion, store: Store = Depends(get_store),
):
    """Store a new question; the Store assigns its id."""
    await store.add_question(body)
    return "question added"


@router.put("/{question_id}", response_model=Question)
async def update_question(
    body: Question,
    question_id: int = Path(le=MAX_PARAMETER),
    store: Store = Depends(get_store),
):
    """Replace the question stored under question_id."""
    return await store.update_question(body, QuestionId(question_id))


@router.delete("/{question_id}", response_class=PlainTextResponse)
async def delete_question(
    question_id: int = Path(le=MAX_PARAMETER),
    store: Store = Depends(get_store),
):
    """Delete the question stored under question_id."""
    await store.delete_question(QuestionId(question_id))
    return f"Question {question_id} deleted"
