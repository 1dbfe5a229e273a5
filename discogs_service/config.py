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
Discogs Service Configuration.

Centralized storage for all settings and constants.
Loads environment variables and provides typed access to them.
"""

import os
import sys

from dotenv import load_dotenv
from loguru import logger

from discogs_service.models import AuthMethod, AuthTransport

# Load environment variables
load_dotenv()

# ==================================================================================================
# Application
# ==================================================================================================

APP_VERSION: str = "1.0.0"

# Logging level for the package's loguru sink
# Available levels: TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ==================================================================================================
# Discogs API
# ==================================================================================================

DEFAULT_DISCOGS_API_BASE_URL: str = "https://api.discogs.com"
DISCOGS_API_BASE_URL: str = os.getenv(
    "DISCOGS_API_BASE_URL", DEFAULT_DISCOGS_API_BASE_URL
).rstrip("/")

# ==================================================================================================
# Credentials
# ==================================================================================================

# Consumer key/secret pair issued for a registered Discogs application.
# Both must be set to use consumer authentication.
DISCOGS_CONSUMER_KEY: str = os.getenv("DISCOGS_CONSUMER_KEY", "")
DISCOGS_CONSUMER_SECRET: str = os.getenv("DISCOGS_CONSUMER_SECRET", "")

# Personal access token. Takes precedence over the consumer pair when set.
DISCOGS_USER_TOKEN: str = os.getenv("DISCOGS_USER_TOKEN", "")

# Where credentials are sent: "header" (Authorization header) or "query".
DISCOGS_AUTH_TRANSPORT: str = os.getenv("DISCOGS_AUTH_TRANSPORT", "header").strip().lower()


def resolve_auth_method() -> AuthMethod:
    """
    Build the authentication method from configured credentials.

    Priority:
      1. DISCOGS_USER_TOKEN
      2. DISCOGS_CONSUMER_KEY + DISCOGS_CONSUMER_SECRET
      3. No authentication

    Credentials are returned as configured; validation happens when the
    auth middleware is built.

    Returns:
        Configured AuthMethod
    """
    if DISCOGS_USER_TOKEN:
        return AuthMethod.user(token=DISCOGS_USER_TOKEN)
    if DISCOGS_CONSUMER_KEY or DISCOGS_CONSUMER_SECRET:
        return AuthMethod.consumer(
            key=DISCOGS_CONSUMER_KEY, secret=DISCOGS_CONSUMER_SECRET
        )
    return AuthMethod.none()


def resolve_auth_transport() -> AuthTransport:
    """
    Parse DISCOGS_AUTH_TRANSPORT.

    Returns:
        Configured AuthTransport

    Raises:
        ValueError: If the configured value is neither "header" nor "query"
    """
    try:
        return AuthTransport(DISCOGS_AUTH_TRANSPORT)
    except ValueError:
        raise ValueError(
            f"DISCOGS_AUTH_TRANSPORT must be 'header' or 'query', "
            f"got {DISCOGS_AUTH_TRANSPORT!r}"
        ) from None


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: Minimum loguru level name
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
