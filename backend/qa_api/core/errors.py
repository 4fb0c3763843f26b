"""Error Taxonomy — the closed set of recoverable failures a request can hit.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Messages are fixed per kind; only ParseError embeds its underlying cause
    - Client-caused errors answer 416; DatabaseQueryError answers 422
    - Errors are raised explicitly by the layer that detects them, never inferred

Design Decisions:
    - Exceptions over result values: FastAPI exception handlers translate them once
      at the boundary (api/error_handlers.py) (ADR: uniform error shape)
    - 416 for the whole client-side taxonomy is historical; kept for wire compatibility
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RANGE = "range"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    ROUTING = "routing"
    CORS = "cors"
    INTERNAL = "internal"


RANGE_NOT_SATISFIABLE = 416
UNPROCESSABLE_ENTITY = 422


class QAError(Exception):
    """Base exception for every member of the error taxonomy."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        http_status: int = RANGE_NOT_SATISFIABLE,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def __str__(self) -> str:
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
            }
        }


# ─── Input-shape errors ─────────────────────────────────────────

class ParseError(QAError):
    """A pagination parameter is not a non-negative integer."""
    def __init__(self, cause: Exception):
        super().__init__(
            f"cannot parse parameter: {cause}",
            "PARSE_ERROR", ErrorCategory.VALIDATION,
        )
        self.cause = cause


class MissingParameters(QAError):
    """Only one half of a paired pagination parameter was supplied."""
    def __init__(self):
        super().__init__(
            "Missing parameter.", "MISSING_PARAMETERS", ErrorCategory.VALIDATION,
        )


# ─── Semantic errors ────────────────────────────────────────────

class OutOfBounds(QAError):
    """Requested range ends past the current result set."""
    def __init__(self):
        super().__init__(
            "Index out of bounds.", "OUT_OF_BOUNDS", ErrorCategory.RANGE,
        )


class StartLargerThanEnd(QAError):
    """Requested range starts after it ends."""
    def __init__(self):
        super().__init__(
            "Start larger than end.", "START_LARGER_THAN_END", ErrorCategory.RANGE,
        )


class QuestionNotFound(QAError):
    """No question is stored under the requested id."""
    def __init__(self, question_id: int | None = None):
        super().__init__(
            "Question not found", "QUESTION_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND,
        )
        self.question_id = question_id


# ─── Backing-store errors ───────────────────────────────────────

class DatabaseQueryError(QAError):
    """The backing store rejected or failed an operation."""
    def __init__(self, operation: str = "query"):
        super().__init__(
            "Cannot update, invalid data.", "DATABASE_QUERY_ERROR",
            ErrorCategory.DATABASE, ErrorSeverity.ERROR, UNPROCESSABLE_ENTITY,
        )
        self.operation = operation


class StartupError(Exception):
    """The backing store could not be reached while the process was starting."""
