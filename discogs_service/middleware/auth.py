# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Authentication middleware.

Adds Discogs credentials to every outgoing request, either as an
Authorization header or as query parameters.

Credentials are validated and formatted once, when the middleware is
built. Per request the middleware only replays that decision:
  - AuthMethod.none()      -> request forwarded unchanged
  - AuthTransport.ON_HEADER -> one Authorization entry appended
  - AuthTransport.ON_QUERY  -> key/secret or token appended to the query

Header formats:
    Authorization: Discogs key=<key>, secret=<secret>
    Authorization: Discogs token=<token>
"""

from typing import Optional, Tuple
from urllib.parse import urlencode, urlsplit

from loguru import logger

from discogs_service.middleware.chain import Body, Next, Response
from discogs_service.models import (
    AUTHORIZATION,
    PARAMETER_KEY,
    PARAMETER_SECRET,
    PARAMETER_TOKEN,
    AuthKind,
    AuthMethod,
    AuthTransport,
    HTTPField,
    HTTPRequest,
    QueryItem,
)
from discogs_service.validation import (
    validate_consumer_key,
    validate_consumer_secret,
    validate_user_token,
)

_AUTH_CONSUMER_FORMAT = "Discogs key={key}, secret={secret}"
_AUTH_USER_FORMAT = "Discogs token={token}"


class AuthMiddleware:
    """
    Injects authentication credentials into outgoing requests.

    Attributes:
        auth_field: Authorization header to append, or None
        auth_items: Query items to append, or None

    Example:
        >>> middleware = AuthMiddleware(
        ...     AuthMethod.user(token="aAbBcCdDeEfFgGhHiIjJkKlLmMnNoOpPqQrRsStT"),
        ...     AuthTransport.ON_HEADER,
        ... )
        >>> middleware.auth_field.value
        'Discogs token=aAbBcCdDeEfFgGhHiIjJkKlLmMnNoOpPqQrRsStT'
    """

    __slots__ = ("auth_field", "auth_items")

    def __init__(
        self,
        method: Optional[AuthMethod] = None,
        transport: AuthTransport = AuthTransport.ON_HEADER,
    ):
        """
        Validates credentials and precomputes what each request receives.

        Args:
            method: Authentication method (defaults to AuthMethod.none())
            transport: Where credentials are placed in requests; plain
                "header" and "query" strings are accepted

        Raises:
            InputValidationError: If a credential fails validation. The
                first failing check is reported; the key is checked
                before the secret.
            ValueError: If transport is not an AuthTransport value.
        """
        method = method or AuthMethod.none()
        transport = AuthTransport(transport)
        auth_field: Optional[HTTPField] = None
        auth_items: Optional[Tuple[QueryItem, ...]] = None

        if method.kind is AuthKind.CONSUMER:
            validate_consumer_key(method.key)
            validate_consumer_secret(method.secret)
            if transport is AuthTransport.ON_HEADER:
                auth_field = HTTPField(
                    name=AUTHORIZATION,
                    value=_AUTH_CONSUMER_FORMAT.format(
                        key=method.key, secret=method.secret
                    ),
                )
            else:
                auth_items = (
                    QueryItem(name=PARAMETER_KEY, value=method.key),
                    QueryItem(name=PARAMETER_SECRET, value=method.secret),
                )

        elif method.kind is AuthKind.USER:
            validate_user_token(method.token)
            if transport is AuthTransport.ON_HEADER:
                auth_field = HTTPField(
                    name=AUTHORIZATION,
                    value=_AUTH_USER_FORMAT.format(token=method.token),
                )
            else:
                auth_items = (QueryItem(name=PARAMETER_TOKEN, value=method.token),)

        object.__setattr__(self, "auth_field", auth_field)
        object.__setattr__(self, "auth_items", auth_items)

        logger.debug(
            "[AuthMiddleware] Built for method={}, transport={}",
            method.kind.value,
            transport.value,
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def should_authenticate(self) -> bool:
        """Whether intercepted requests receive credentials."""
        return self.auth_field is not None or self.auth_items is not None

    async def intercept(
        self,
        request: HTTPRequest,
        body: Body,
        base_url: str,
        operation_id: str,
        next: Next,
    ) -> Tuple[Response, Body]:
        """
        Add credentials to request and forward it.

        Args:
            request: Outgoing request
            body: Request body (forwarded untouched)
            base_url: Base URL of the API
            operation_id: Identifier of the API operation being called
            next: Next stage of the chain

        Returns:
            Whatever the next stage returns
        """
        if not self.should_authenticate:
            return await next(request, body, base_url)

        if self.auth_field is not None:
            request = request.with_appended_field(self.auth_field)
        else:
            request = request.with_path(self._authenticate_path(request.path))

        return await next(request, body, base_url)

    def _authenticate_path(self, path: Optional[str]) -> Optional[str]:
        """
        Append the authentication query items to path.

        Existing query parameters keep their position; the credentials go
        after them. Paths that cannot be parsed are returned unchanged.

        Args:
            path: Request path, possibly with a query string

        Returns:
            Path with credentials in its query string
        """
        if not self.auth_items or path is None:
            return path

        try:
            urlsplit(path)
        except ValueError as e:
            logger.warning(
                "[AuthMiddleware] Could not parse request path, forwarding without "
                "query credentials: {}",
                e,
            )
            return path

        # Everything before "?" is kept verbatim; a leading "//" is not a netloc here.
        path, _, _ = path.partition("#")
        base, _, query = path.partition("?")
        auth_query = urlencode([(item.name, item.value) for item in self.auth_items])
        query = f"{query}&{auth_query}" if query else auth_query
        return f"{base}?{query}"

    def __repr__(self) -> str:
        if self.auth_field is not None:
            placement = "header"
        elif self.auth_items is not None:
            placement = "query"
        else:
            placement = "none"
        return f"AuthMiddleware({placement})"


def build_auth_middleware(
    method: Optional[AuthMethod] = None,
    transport: AuthTransport = AuthTransport.ON_HEADER,
) -> AuthMiddleware:
    """Build an AuthMiddleware, raising InputValidationError on bad credentials."""
    return AuthMiddleware(method=method, transport=transport)
