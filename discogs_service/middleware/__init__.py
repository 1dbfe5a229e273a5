# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Client middlewares for outgoing Discogs requests.

Architecture:
    Each middleware validates its inputs once, at construction, and keeps
    only the precomputed values it injects. Its intercept() coroutine takes
    a request, returns a rewritten copy to the next stage, and never
    raises validation errors.

Middlewares:
    1. AuthMiddleware      - Authorization header or key/secret/token query
    2. UserAgentMiddleware - "<name>/<version> +<url>" User-Agent header
"""

from discogs_service.middleware.auth import AuthMiddleware, build_auth_middleware
from discogs_service.middleware.chain import (
    ClientMiddleware,
    MiddlewareTransport,
    run_middleware_chain,
)
from discogs_service.middleware.user_agent import UserAgentMiddleware

__all__ = [
    "AuthMiddleware",
    "UserAgentMiddleware",
    "ClientMiddleware",
    "MiddlewareTransport",
    "build_auth_middleware",
    "run_middleware_chain",
]
