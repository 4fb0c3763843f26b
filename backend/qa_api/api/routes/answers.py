"""Answers — create answers from form-encoded bodies.

Invariants:
    - content and question_id are required form fields; question_id must be an int within 0..2**31-1
    - question_id is not checked against stored questions (weak reference)
"""

from fastapi import APIRouter, Depends, Form
from fastapi.responses import PlainTextResponse

from qa_api.api.dependencies import get_store
from qa_api.core.pagination import MAX_PARAMETER
from qa_api.core.repository_protocols import Store
from qa_api.schemas.answer import NewAnswer

router = APIRouter(prefix="/answers", tags=["answers"])


@router.post("", response_class=PlainTextResponse)
async def add_answer(
    content: str = Form(...),
    question_id: int = Form(..., le=MAX_PARAMETER),
    store: Store = Depends(get_store),
):
    """Store a new answer; the Store assigns its id."""
    await store.add_answer(NewAnswer(content=content, question_id=question_id))
    return "Answer added"
