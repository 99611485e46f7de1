"""
Module to classify collection responses by their pagination strategy.

A collection response carries no explicit indication of how it is paginated; the strategy is
inferred from the fields present in its body:

  • offset: an integer "offset" field, with "limit" and optionally "total_count"
  • marker: a "next_marker" field, which can be empty or null on the last page
  • event stream: "next_stream_position" and "chunk_size" fields; not supported
  • unknown: none of the above; treated as a single, complete page
"""

import enum

from collections.abc import Mapping, Sequence
from pageturn.http import Response
from typing import Any


METHODS = frozenset({"GET", "POST"})


class Shape(enum.Enum):
    """Shape of a response, as it pertains to pagination."""

    NOT_COLLECTION = "not_collection"
    EVENT_STREAM = "event_stream"
    OFFSET = "offset"
    MARKER = "marker"
    UNKNOWN = "unknown"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    """Return True if a value is a sequence of items, other than a string."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def classify(response: Response) -> Shape:
    """Return the shape of a response."""
    body = response.body
    request = response.request
    if not isinstance(body, Mapping) or not is_sequence(body.get("entries")):
        return Shape.NOT_COLLECTION
    if request is None or request.method not in METHODS:
        return Shape.NOT_COLLECTION
    if "next_stream_position" in body and "chunk_size" in body:
        return Shape.EVENT_STREAM
    if _is_int(body.get("offset")):
        return Shape.OFFSET
    if "next_marker" in body:
        return Shape.MARKER
    return Shape.UNKNOWN


def is_iterable(response: Response) -> bool:
    """Return True if a response contains a collection that can be paged through."""
    return classify(response) not in {Shape.NOT_COLLECTION, Shape.EVENT_STREAM}
