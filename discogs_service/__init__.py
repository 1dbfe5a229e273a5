# -*- coding: utf-8 -*-

# Discogs Service
# Copyright (C) 2025 Discogs Service contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
Discogs Service - request authentication and input validation for Discogs API clients.

Modules:
    - config: Configuration and constants
    - errors: Input validation errors
    - models: Credential, product and request value types
    - validation: Validation rules and pipelines
    - middleware: Auth and User-Agent middlewares, middleware chain
    - client: httpx client factory
"""

from discogs_service.config import APP_VERSION as __version__

from discogs_service.client import create_client
from discogs_service.errors import InputValidationError, InputValidationReason
from discogs_service.middleware import (
    AuthMiddleware,
    MiddlewareTransport,
    UserAgentMiddleware,
    run_middleware_chain,
)
from discogs_service.models import (
    AuthKind,
    AuthMethod,
    AuthTransport,
    HTTPField,
    HTTPRequest,
    Product,
    QueryItem,
)

__all__ = [
    # Version
    "__version__",

    # Middlewares
    "AuthMiddleware",
    "UserAgentMiddleware",
    "MiddlewareTransport",
    "run_middleware_chain",
    "create_client",

    # Models
    "AuthKind",
    "AuthMethod",
    "AuthTransport",
    "Product",
    "HTTPField",
    "HTTPRequest",
    "QueryItem",

    # Errors
    "InputValidationError",
    "InputValidationReason",
]
