"""
Module to iterate through items of a paginated collection.

A collection endpoint of an API returns the first page of its items in its response. A paging
iterator is created from that response. It yields the items of the first page, then requests
each subsequent page on demand through a transport, until there are no further pages.

Example:

response = await transport.request("GET", "https://api.example.com/2.0/folders/0/items")
async for item in PagingIterator(response, transport):
    ...

Items are pulled with the `next` coroutine method, which returns a result containing the item
and a flag indicating whether the collection has been exhausted. Calls to `next` can be made
before previous calls have completed; they are executed in the order they are made, and a
page is never requested more than once.
"""

import enum
import logging

from collections import deque
from collections.abc import AsyncIterator, Mapping
from pageturn.continuation import build_options
from pageturn.error import NotCollectionError, PagingError, status_error
from pageturn.http import Request, Response, Transport
from pageturn.paging import PaginationState, advance, initial_state
from pageturn.queue import SerialQueue, serialized
from pageturn.strategy import Shape, classify, is_sequence
from typing import Any, NamedTuple


_logger = logging.getLogger(__name__)


class Result(NamedTuple):
    """
    The result of pulling an item from a paging iterator.

    Attributes:
    • value: the item pulled, or None if the iterator is exhausted
    • done: True if the iterator is exhausted
    """

    value: Any = None
    done: bool = False


class Status(enum.Enum):
    """Status of a paging iterator."""

    READY = "ready"  # buffered items remain
    FETCHING = "fetching"  # next item requires a page to be fetched
    EXHAUSTED = "exhausted"  # no items remain


class PagingIterator(AsyncIterator[Any]):
    """
    Asynchronous iterator over the items of a paginated collection.

    Parameters:
    • response: response containing the initial page of the collection
    • transport: transport used to fetch subsequent pages

    Raises NotCollectionError if the response does not contain a collection that can be paged
    through.
    """

    def __init__(self, response: Response, transport: Transport):
        shape = classify(response)
        if shape in {Shape.NOT_COLLECTION, Shape.EVENT_STREAM}:
            raise NotCollectionError(f"response is not a paginated collection: {shape.value}")
        self._request: Request = response.request
        self._transport = transport
        self._state = initial_state(shape, response.body)
        self._buffer = deque(response.body["entries"])
        self._queue = SerialQueue()
        _logger.debug(
            "paging %s %s with %s strategy",
            self._request.method,
            self._request.base_url,
            self._state.strategy.value,
        )

    def __repr__(self):
        return (
            f"PagingIterator(request={self._request}, state={self._state}, "
            f"buffered={len(self._buffer)})"
        )

    @property
    def request(self) -> Request:
        """The request that produced the initial page."""
        return self._request

    @property
    def state(self) -> PaginationState:
        """Current pagination state."""
        return self._state

    @property
    def limit(self) -> int:
        return self._state.limit

    @property
    def next_field(self) -> str:
        return self._state.next_field

    @property
    def next_value(self) -> int | str | None:
        return self._state.next_value

    @property
    def done(self) -> bool:
        """True if no further pages will be requested."""
        return self._state.done

    @property
    def buffer(self) -> tuple[Any, ...]:
        """Items fetched, but not yet pulled."""
        return tuple(self._buffer)

    @property
    def status(self) -> Status:
        if self._buffer:
            return Status.READY
        if self._state.done:
            return Status.EXHAUSTED
        return Status.FETCHING

    def get_next_marker(self) -> int | str | None:
        """
        Return the cursor value to request the next page with. This value can be retained to
        resume paging through the collection later.
        """
        return self._state.next_value

    @serialized
    async def next(self) -> Result:
        """
        Pull the next item from the collection. The call is queued behind any calls still
        pending; the returned future resolves once the item is available.

        If the buffered page is exhausted, the next page is fetched. If fetching the page
        fails, the exception is raised and the iterator remains positioned where it was; a
        subsequent call will request the page again. If the caller cancels the call while a
        page is being fetched, the page is kept and no item is consumed.
        """
        while True:
            if self._queue.cancelled:  # caller has gone; leave items for the next call
                return None
            if self._buffer:
                return Result(self._buffer.popleft(), False)
            if self._state.done:
                return Result(None, True)
            await self._fetch()

    async def _fetch(self) -> None:
        url = self._request.base_url
        options = build_options(self._request, self._state)
        _logger.debug(
            "fetching page: %s %s %s=%r",
            self._request.method,
            url,
            self._state.next_field,
            self._state.next_value,
        )
        if self._request.method == "POST":
            response = await self._transport.post(url, options)
        else:
            response = await self._transport.get(url, options)
        if response.status != 200:
            raise status_error(response.status, url)
        body = response.body
        if not isinstance(body, Mapping) or not is_sequence(body.get("entries")):
            raise PagingError(f"response is not a page of the collection: {url}")
        self._state = advance(self._state, body)
        self._buffer = deque(body["entries"])

    async def __anext__(self) -> Any:
        result = await self.next()
        if result.done:
            raise StopAsyncIteration
        return result.value


async def paginate(response: Response, transport: Transport, /):
    """
    Return an asynchronous generator that iterates through all items of a paginated
    collection.

    Parameters:
    • response: response containing the initial page of the collection
    • transport: transport used to fetch subsequent pages
    """
    async for item in PagingIterator(response, transport):
        yield item
