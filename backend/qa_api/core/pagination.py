"""Pagination Extractor — turns raw query parameters into a typed page request.

Invariants:
    - Paired keys travel together: both present or neither, else MissingParameters
    - Values must be plain ASCII digits within 0..2**31-1, else ParseError (carries the cause)
    - start > end is rejected here, before the Store is touched
    - end > result length is rejected by check_range_bounds, after the Store is queried
    - Unrecognized keys are ignored

Design Decisions:
    - Pure functions over a Mapping[str, str]: no FastAPI types, trivially testable
    - Absence of both keys is the "no pagination" path, not an error
"""

from collections.abc import Mapping
from dataclasses import dataclass

from qa_api.core.errors import (
    MissingParameters, OutOfBounds, ParseError, StartLargerThanEnd,
)


@dataclass(frozen=True)
class Pagination:
    """limit/offset window. limit=None means every remaining item."""
    limit: int | None = None
    offset: int = 0


@dataclass(frozen=True)
class IndexRange:
    """Half-open [start, end) slice over the current result set."""
    start: int
    end: int


# Largest value a 32-bit signed column or driver parameter accepts.
MAX_PARAMETER = 2**31 - 1


def _parse_non_negative(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise ParseError(ValueError(f"invalid digit found in string: {raw!r}"))
    value = int(raw)
    if value > MAX_PARAMETER:
        raise ParseError(
            ValueError(f"number too large to fit in target type: {raw!r}"),
        )
    return value


def _extract_pair(
    params: Mapping[str, str], first: str, second: str,
) -> tuple[int, int] | None:
    has_first, has_second = first in params, second in params
    if not has_first and not has_second:
        return None
    if not (has_first and has_second):
        raise MissingParameters()
    return _parse_non_negative(params[first]), _parse_non_negative(params[second])


def extract_pagination(params: Mapping[str, str]) -> Pagination:
    """Extract a limit/offset window from `/questions?limit=10&offset=0`.

    Returns the default (unbounded) Pagination when neither key is present.
    """
    pair = _extract_pair(params, "limit", "offset")
    if pair is None:
        return Pagination()
    limit, offset = pair
    return Pagination(limit=limit, offset=offset)


def extract_range(params: Mapping[str, str]) -> IndexRange | None:
    """Extract a start/end range from `/questions?start=1&end=10`.

    Returns None when neither key is present.
    """
    pair = _extract_pair(params, "start", "end")
    if pair is None:
        return None
    start, end = pair
    if start > end:
        raise StartLargerThanEnd()
    return IndexRange(start=start, end=end)


def check_range_bounds(index_range: IndexRange, length: int) -> None:
    """Reject a range that ends past a result set of `length` items."""
    if index_range.end > length:
        raise OutOfBounds()
