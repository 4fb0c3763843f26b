"""Domain Types — identity types and configuration enums.

Invariants:
    - QuestionId, AnswerId wrap ints — assigned by the Store, never by clients
    - All valid configuration choices encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: pydantic-settings parses them straight from environment variables
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

QuestionId = NewType("QuestionId", int)
AnswerId = NewType("AnswerId", int)


# ─── Enums ───────────────────────────────────────────────────────

class StoreBackend(str, Enum):
    """Which Store implementation the process root builds."""
    DATABASE = "database"
    MEMORY = "memory"


class PaginationStyle(str, Enum):
    """Which pagination policy GET /questions enforces."""
    OFFSET = "offset"   # limit/offset, out-of-range → empty page
    RANGE = "range"     # start/end, bounds-checked against the result set
