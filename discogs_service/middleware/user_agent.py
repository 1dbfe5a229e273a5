# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
User-Agent middleware.

Discogs asks every client to identify itself with a descriptive
User-Agent. This middleware builds one from a Product and appends it
to every outgoing request:

    User-Agent: <name>/<version> +<url>
"""

from typing import Tuple

from loguru import logger

from discogs_service.middleware.chain import Body, Next, Response
from discogs_service.models import USER_AGENT, HTTPField, HTTPRequest, Product
from discogs_service.validation import (
    validate_product_name,
    validate_product_url,
    validate_product_version,
)

_USER_AGENT_FORMAT = "{name}/{version} +{url}"


class UserAgentMiddleware:
    """
    Appends a User-Agent header to outgoing requests.

    Attributes:
        agent_field: Precomputed User-Agent header
    """

    __slots__ = ("agent_field",)

    def __init__(self, product: Product):
        """
        Validates product and precomputes the header.

        Args:
            product: Identity of the consuming application

        Raises:
            InputValidationError: If name, version or url is invalid
                (checked in that order)
        """
        validate_product_name(product.name)
        validate_product_version(product.version)
        validate_product_url(product.url)

        object.__setattr__(
            self,
            "agent_field",
            HTTPField(
                name=USER_AGENT,
                value=_USER_AGENT_FORMAT.format(
                    name=product.name, version=product.version, url=product.url
                ),
            ),
        )
        logger.debug("[UserAgentMiddleware] User-Agent: {}", self.agent_field.value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    async def intercept(
        self,
        request: HTTPRequest,
        body: Body,
        base_url: str,
        operation_id: str,
        next: Next,
    ) -> Tuple[Response, Body]:
        return await next(request.with_appended_field(self.agent_field), body, base_url)

    def __repr__(self) -> str:
        return f"UserAgentMiddleware({self.agent_field.value!r})"
