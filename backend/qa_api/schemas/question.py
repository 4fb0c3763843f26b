"""Question Schemas — Pydantic models for the /questions API boundary.

Invariants:
    - NewQuestion carries no id; the Store assigns it
    - Unknown body fields (e.g. a client-supplied id on POST) are ignored
    - Question.tags is optional and ordered

Design Decisions:
    - from_attributes=True: Question validates straight from ORM rows
"""

from pydantic import BaseModel, ConfigDict


class NewQuestion(BaseModel):
    """POST /questions body."""
    title: str
    content: str
    tags: list[str] | None = None


class Question(BaseModel):
    """A stored question; also the PUT /questions/{id} body."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    tags: list[str] | None = None
