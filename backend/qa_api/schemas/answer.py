"""Answer Schemas — Pydantic models for the /answers API boundary.

Invariants:
    - question_id is a weak reference: never checked against stored questions
"""

from pydantic import BaseModel, ConfigDict


class NewAnswer(BaseModel):
    """POST /answers form body."""
    content: str
    question_id: int


class Answer(BaseModel):
    """A stored answer."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    question_id: int
