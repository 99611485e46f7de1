"""Module to submit requests for collection pages through an HTTPX asynchronous client."""

import httpx
import logging

from collections.abc import Mapping
from pageturn.continuation import encode_body
from pageturn.http import Headers, Query, Request, RequestOptions, Response
from typing import Any, Optional


_logger = logging.getLogger(__name__)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    if "json" in response.headers.get("content-type", ""):
        return response.json()
    return response.text


class HTTPXTransport:
    """
    Transport that submits requests through an HTTPX asynchronous client.

    Parameters:
    • client: client to submit requests through

    Authorization, timeouts and retries are configured in the client. JSON response bodies
    are decoded. Errors raised by the client propagate unchanged.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> Response:
        """
        Submit a request, and return its response. The response can be used to create a
        paging iterator. Query parameters are merged with any query string in the URL.

        Authorization is not carried forward to subsequent pages; it must be configured in the
        client. An Authorization header supplied here applies to this request only.

        Parameters:
        • method: HTTP method of the request
        • url: request target URL
        • headers: request headers
        • query: query string parameters
        • body: body parameters, to be encoded as JSON
        """
        if headers and "authorization" in (k.lower() for k in headers):
            _logger.warning("authorization header is not carried forward to subsequent pages")
        options = RequestOptions(
            headers=Headers(headers or ()),
            query=Query(query or ()),
            body=dict(body) if body is not None else None,
        )
        return await self._send(method.upper(), url, options)

    async def get(self, url: str, options: RequestOptions) -> Response:
        return await self._send("GET", url, options)

    async def post(self, url: str, options: RequestOptions) -> Response:
        return await self._send("POST", url, options)

    async def _send(self, method: str, url: str, options: RequestOptions) -> Response:
        target = httpx.URL(url)
        if options.query:
            target = target.copy_merge_params(list(options.query.items()))
        headers = Headers(options.headers)
        content = None
        if options.body is not None:
            content = encode_body(options.body)
            headers.setdefault("Content-Type", "application/json")
        response = await self.client.request(
            method,
            target,
            headers=list(headers.items()),
            content=content,
        )
        _logger.debug("%s %s: %s", method, response.request.url, response.status_code)
        request = Request(
            method=method,
            url=str(response.request.url),
            headers=options.headers,
            body=options.body,
        )
        return Response(
            status=response.status_code,
            headers=response.headers.multi_items(),
            body=_decode(response),
            request=request,
        )
