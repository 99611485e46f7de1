"""Module to build requests for subsequent pages of a collection."""

import json

from copy import deepcopy
from pageturn.http import Headers, Query, Request, RequestOptions
from pageturn.paging import PaginationState
from typing import Any


def _limit(params: Any, state: PaginationState) -> int:
    """Return the page size to request; an explicitly requested limit is preserved."""
    limit = params.get("limit") if params is not None else None
    if isinstance(limit, str) and limit.strip().isdigit():
        limit = int(limit)
    if isinstance(limit, int) and not isinstance(limit, bool):
        return limit
    return state.limit


def encode_body(body: dict[str, Any]) -> bytes:
    """Encode body parameters as compact JSON."""
    return json.dumps(body, separators=(",", ":")).encode()


def build_options(request: Request, state: PaginationState) -> RequestOptions:
    """
    Return options to request the next page of a collection.

    Parameters:
    • request: the request that produced the initial page of the collection
    • state: current pagination state of the collection

    Headers of the original request are carried forward, except for authorization, which is
    supplied by the transport.
    """
    headers = Headers(request.headers)
    headers.popall("Authorization", None)
    if request.method == "POST":
        body = dict(deepcopy(request.body)) if request.body is not None else {}
        body["limit"] = _limit(request.body, state)
        body[state.next_field] = state.next_value
        headers["Content-Length"] = str(len(encode_body(body)))
        return RequestOptions(headers=headers, query=Query(), body=body)
    query = Query(request.query)
    query["limit"] = _limit(request.query, state)
    query[state.next_field] = state.next_value
    return RequestOptions(headers=headers, query=query)
