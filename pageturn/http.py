"""Module of HTTP messages exchanged with a transport to fetch collection pages."""

import http
import multidict
import urllib.parse

from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol


Headers = multidict.CIMultiDict
Query = multidict.MultiDict


class Request:
    """
    A snapshot of the HTTP request that produced a response.

    Parameters and attributes:
    • method: the HTTP method name, in upper case
    • url: request target URL; a query string, if present, is retained
    • headers: multi-value dictionary of request headers
    • query: multi-value dictionary of query string parameters
    • body: decoded body parameters, or None if no body

    If query is not supplied, query string parameters are parsed from the URL.
    """

    def __init__(
        self,
        *,
        method: str = "GET",
        url: str,
        headers: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ):
        self.method = method.upper()
        self.url = url
        self.headers = Headers(headers or ())
        if query is None:
            query = urllib.parse.parse_qsl(urllib.parse.urlsplit(url).query)
        self.query = Query(query)
        self.body = deepcopy(body) if body is not None else None

    @property
    def base_url(self) -> str:
        """Request target URL, without query string or fragment."""
        parts = urllib.parse.urlsplit(self.url)
        return urllib.parse.urlunsplit(parts._replace(query="", fragment=""))

    def __repr__(self):
        return (
            f"Request(method={self.method}, url={self.url}, headers={self.headers}, "
            f"query={self.query}, body={self.body})"
        )


class Response:
    """
    HTTP response, with a decoded body.

    Parameters and attributes:
    • status: HTTP status code
    • headers: multi-value dictionary of response headers
    • body: decoded response body, or None if no body
    • request: the request that produced the response, or None if unknown
    """

    def __init__(
        self,
        *,
        status: int = http.HTTPStatus.OK.value,
        headers: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        request: Optional[Request] = None,
    ):
        self.status = status
        self.headers = Headers(headers or ())
        self.body = body
        self.request = request

    def __repr__(self):
        return (
            f"Response(status={self.status}, headers={self.headers}, body={self.body}, "
            f"request={self.request})"
        )


@dataclass
class RequestOptions:
    """
    Options to submit a request through a transport.

    Attributes:
    • headers: request headers
    • query: query string parameters
    • body: body parameters, or None if no body
    """

    headers: Headers = field(default_factory=Headers)
    query: Query = field(default_factory=Query)
    body: Optional[dict[str, Any]] = None


class Transport(Protocol):
    """
    Capability to submit HTTP requests. Authorization of requests is the responsibility of the
    transport; so are timeouts and retries.
    """

    async def get(self, url: str, options: RequestOptions) -> Response:
        """Submit a GET request; the query string is supplied in options."""
        ...

    async def post(self, url: str, options: RequestOptions) -> Response:
        """Submit a POST request; the body is supplied in options."""
        ...
