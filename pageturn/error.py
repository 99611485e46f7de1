"""Paging error module."""

import http

from collections.abc import Iterator


class PagingError(Exception):
    """Base class for errors raised while paging through a collection."""


class NotCollectionError(PagingError, TypeError):
    """
    Raised if a response is not a paginated collection. This is a contract error on the part
    of the caller; it is not raised as a result of network conditions.
    """


class UnexpectedStatusError(PagingError):
    """
    Raised if a request for the next page of a collection completes with a status other than
    200 OK.

    Parameters and attributes:
    • status: HTTP status code of the response
    • url: URL of the request that was made to fetch the page

    Attribute:
    • phrase: HTTP reason phrase of the status, or None if the status is not recognized
    """

    def __init__(self, status: int, url: str | None = None):
        self.status = status
        self.url = url
        try:
            self.phrase = http.HTTPStatus(status).phrase
        except ValueError:
            self.phrase = None
        message = f"unexpected status fetching page: {status}"
        if self.phrase:
            message += f" {self.phrase}"
        if url:
            message += f" ({url})"
        super().__init__(message)


class _Errors:
    """
    Encapsulates unexpected status error classes. Errors are dynamically generated from client
    and server errors in the http.HTTPStatus enum.

    Errors can be accessed by HTTP status or name.
    Example: pageturn.error.errors[404] == pageturn.error.errors.NotFoundError
    """

    def __init__(self):
        self._names = {}
        self._codes = {}
        for status in (s for s in http.HTTPStatus if 400 <= s.value <= 599):
            name = "".join(
                w.title() if w not in {"HTTP", "URI"} else w for w in status.name.split("_")
            )
            if not name.endswith("Error"):
                name += "Error"
            error = type(
                name,
                (UnexpectedStatusError,),
                {"__doc__": f"{status.description or status.phrase.capitalize()}."},
            )
            self._names[name] = error
            self._codes[status.value] = error

    def get(self, code: int, default=None) -> type[UnexpectedStatusError]:
        """Return error class for code."""
        return self._codes.get(code, default)

    def __getitem__(self, code: int) -> type[UnexpectedStatusError]:
        return self._codes[code]

    def __getattr__(self, name: str) -> type[UnexpectedStatusError]:
        if error := self._names.get(name):
            return error
        raise AttributeError(name)

    def __iter__(self) -> Iterator[type[UnexpectedStatusError]]:
        return iter(self._codes.values())


errors = _Errors()


def status_error(status: int, url: str | None = None) -> UnexpectedStatusError:
    """Return an error for an unexpected response status."""
    return errors.get(status, UnexpectedStatusError)(status, url)


# commonly encountered errors
BadRequestError = errors.BadRequestError
InternalServerError = errors.InternalServerError
NotFoundError = errors.NotFoundError
TooManyRequestsError = errors.TooManyRequestsError
