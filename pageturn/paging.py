"""
Module to track the cursor position of a paginated collection.

Pagination state is an immutable value. It is derived from the body of the initial response
of a collection, then replaced with a new value computed from the body of each subsequently
fetched page. Once state indicates that paging is done, it remains done.
"""

import dataclasses
import enum
import logging

from collections.abc import Mapping
from pageturn.strategy import Shape
from typing import Any


_logger = logging.getLogger(__name__)


class Strategy(enum.Enum):
    """Pagination strategy of a collection."""

    OFFSET = "offset"
    MARKER = "marker"
    UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True)
class PaginationState:
    """
    Cursor position in a paginated collection.

    Attributes:
    • strategy: pagination strategy of the collection
    • limit: number of items in a page
    • next_field: name of the request parameter that conveys the cursor
    • next_value: cursor value to request the next page with
    • done: True if there are no further pages to request
    """

    strategy: Strategy
    limit: int
    next_field: str
    next_value: int | str | None
    done: bool


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _limit(body: Mapping[str, Any]) -> int:
    limit = body.get("limit")
    return limit if _is_int(limit) else len(body["entries"])


def _offset_state(limit: int, offset: int, body: Mapping[str, Any]) -> PaginationState:
    entries = body["entries"]
    # an empty page still occupies a page of offsets
    next_value = offset + (len(entries) or limit or 1)
    total_count = body.get("total_count")
    done = next_value >= total_count if _is_int(total_count) else False
    return PaginationState(Strategy.OFFSET, limit, "offset", next_value, done)


def _marker_state(limit: int, body: Mapping[str, Any]) -> PaginationState:
    next_value = body.get("next_marker")
    return PaginationState(Strategy.MARKER, limit, "marker", next_value, next_value in (None, ""))


def initial_state(shape: Shape, body: Mapping[str, Any]) -> PaginationState:
    """
    Return pagination state derived from the body of the initial page of a collection.

    Parameters:
    • shape: shape of the response, as classified
    • body: the response body
    """
    limit = _limit(body)
    match shape:
        case Shape.OFFSET:
            return _offset_state(limit, body["offset"], body)
        case Shape.MARKER:
            return _marker_state(limit, body)
        case Shape.UNKNOWN:
            return PaginationState(Strategy.UNKNOWN, limit, "marker", None, True)
    raise ValueError(f"response shape cannot be paginated: {shape.value}")


def advance(state: PaginationState, body: Mapping[str, Any]) -> PaginationState:
    """
    Return pagination state after a page has been fetched.

    Parameters:
    • state: pagination state that the page was requested with
    • body: the body of the fetched page

    For the offset strategy, the next offset is computed from the offset reported in the
    fetched page. If the collection reports no total count, an empty page marks the end of
    the collection.
    """
    if state.done:
        return state
    entries = body["entries"]
    match state.strategy:
        case Strategy.OFFSET:
            offset = body.get("offset")
            if not _is_int(offset):
                offset = state.next_value
            result = _offset_state(state.limit, offset, body)
            if not _is_int(body.get("total_count")) and len(entries) == 0:
                result = dataclasses.replace(result, done=True)
        case Strategy.MARKER:
            result = _marker_state(state.limit, body)
        case _:
            result = dataclasses.replace(state, done=True)
    _logger.debug(
        "advanced %s cursor: %s=%r done=%s",
        result.strategy.value,
        result.next_field,
        result.next_value,
        result.done,
    )
    return result
