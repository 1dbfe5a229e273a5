# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
httpx client factory with authentication and User-Agent middlewares installed.
"""

from typing import Optional

import httpx
from loguru import logger

from discogs_service.config import (
    DISCOGS_API_BASE_URL,
    resolve_auth_method,
    resolve_auth_transport,
)
from discogs_service.middleware import (
    AuthMiddleware,
    MiddlewareTransport,
    UserAgentMiddleware,
)
from discogs_service.models import AuthMethod, AuthTransport, Product


def create_client(
    product: Product,
    method: Optional[AuthMethod] = None,
    transport: Optional[AuthTransport] = None,
    base_url: Optional[str] = None,
    inner_transport: Optional[httpx.AsyncBaseTransport] = None,
    **client_kwargs,
) -> httpx.AsyncClient:
    """
    Build an httpx.AsyncClient for the Discogs API.

    Both middlewares are built before the client, so invalid credentials or
    product details fail here rather than on the first request.

    httpx's default User-Agent is removed so UserAgentMiddleware supplies the
    only one. A User-Agent passed in client_kwargs["headers"] is kept, and the
    middleware's entry is appended after it.

    Args:
        product: Identity of the consuming application
        method: Authentication method (default: from configuration)
        transport: Credential placement (default: from configuration)
        base_url: API base URL (default: DISCOGS_API_BASE_URL)
        inner_transport: Transport that sends requests (default: httpx.AsyncHTTPTransport)
        **client_kwargs: Extra keyword arguments for httpx.AsyncClient

    Returns:
        Configured httpx.AsyncClient

    Raises:
        InputValidationError: If credentials or product details are invalid
        ValueError: If the configured auth transport is unknown
    """
    if method is None:
        method = resolve_auth_method()
    if transport is None:
        transport = resolve_auth_transport()
    transport = AuthTransport(transport)

    middlewares = [
        AuthMiddleware(method=method, transport=transport),
        UserAgentMiddleware(product),
    ]

    logger.info(
        "Creating Discogs client (auth={}, transport={})",
        method.kind.value,
        transport.value,
    )
    client = httpx.AsyncClient(
        base_url=base_url or DISCOGS_API_BASE_URL,
        transport=MiddlewareTransport(middlewares, transport=inner_transport),
        **client_kwargs,
    )
    # Drop httpx's default only; a caller-supplied User-Agent stays
    if "User-Agent" not in httpx.Headers(client_kwargs.get("headers")):
        client.headers.pop("User-Agent", None)
    return client
