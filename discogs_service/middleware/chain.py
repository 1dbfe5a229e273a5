# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Middleware chain orchestrator.

Runs registered middlewares in registration order before a request is sent.
Each middleware receives the request and a `next` continuation; it may
rewrite headers and/or path, then forwards to `next`. The last `next`
hands the request to the actual sender.

MiddlewareTransport plugs the chain into httpx, so any httpx.AsyncClient
can use the middlewares without knowing about them.
"""

from typing import Awaitable, Callable, List, Optional, Protocol, Sequence, Tuple

import httpx
from loguru import logger

from discogs_service.models import HTTPRequest

Body = Optional[bytes]
Response = httpx.Response
Next = Callable[[HTTPRequest, Body, str], Awaitable[Tuple[Response, Body]]]

_FRAMING_HEADERS = (b"content-length", b"transfer-encoding")


class ClientMiddleware(Protocol):
    """Anything that can intercept an outgoing request."""

    async def intercept(
        self,
        request: HTTPRequest,
        body: Body,
        base_url: str,
        operation_id: str,
        next: Next,
    ) -> Tuple[Response, Body]:
        ...


async def run_middleware_chain(
    middlewares: Sequence[ClientMiddleware],
    request: HTTPRequest,
    body: Body,
    base_url: str,
    operation_id: str,
    send: Next,
) -> Tuple[Response, Body]:
    """
    Run request through every middleware, then through send.

    Args:
        middlewares: Middlewares in registration order
        request: Outgoing request
        body: Request body
        base_url: Base URL of the API
        operation_id: Identifier of the API operation being called
        send: Terminal stage that performs the request

    Returns:
        (response, body) produced by send
    """

    def stage(index: int) -> Next:
        if index == len(middlewares):
            return send
        middleware = middlewares[index]

        async def call(request: HTTPRequest, body: Body, base_url: str) -> Tuple[Response, Body]:
            return await middleware.intercept(
                request, body, base_url, operation_id, stage(index + 1)
            )

        return call

    return await stage(0)(request, body, base_url)


def to_http_request(request: httpx.Request) -> HTTPRequest:
    """Convert an httpx request into the value seen by middlewares."""
    return HTTPRequest(
        method=request.method,
        scheme=request.url.scheme,
        authority=request.url.netloc.decode("ascii"),
        path=request.url.raw_path.decode("ascii"),
        header_fields=httpx.Headers(request.headers.raw),
    )


class MiddlewareTransport(httpx.AsyncBaseTransport):
    """
    httpx transport that runs a middleware chain before sending.

    The operation id is read from the "operation_id" request extension
    and defaults to an empty string.

    Example:
        >>> transport = MiddlewareTransport([auth_middleware, user_agent_middleware])
        >>> client = httpx.AsyncClient(base_url="https://api.discogs.com", transport=transport)
    """

    def __init__(
        self,
        middlewares: Sequence[ClientMiddleware],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            middlewares: Middlewares in registration order
            transport: Transport that actually sends requests
                (default: httpx.AsyncHTTPTransport)
        """
        self.middlewares: List[ClientMiddleware] = list(middlewares)
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        base_url = f"{request.url.scheme}://{request.url.netloc.decode('ascii')}"
        operation_id = str(request.extensions.get("operation_id", ""))

        async def send(outgoing: HTTPRequest, body: Body, base_url: str) -> Tuple[Response, Body]:
            # The body is re-sent fully buffered; httpx recomputes its framing
            headers = [
                (name, value)
                for name, value in outgoing.header_fields.raw
                if name.lower() not in _FRAMING_HEADERS
            ]
            rebuilt = httpx.Request(
                method=outgoing.method,
                url=f"{base_url}{outgoing.path or ''}",
                headers=headers,
                content=body,
                extensions=request.extensions,
            )
            logger.debug(
                "[MiddlewareTransport] Sending {} {} (operation={})",
                rebuilt.method,
                rebuilt.url.path,
                operation_id or "-",
            )
            response = await self._transport.handle_async_request(rebuilt)
            return response, None

        response, _ = await run_middleware_chain(
            self.middlewares,
            to_http_request(request),
            body,
            base_url,
            operation_id,
            send,
        )
        return response

    async def aclose(self) -> None:
        await self._transport.aclose()
