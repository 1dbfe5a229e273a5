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
Value types shared by the middlewares.

Contains:
- AuthKind / AuthMethod: Credential strategy chosen by the caller
- AuthTransport: Where credentials travel (header or query string)
- Product: Name/version/URL describing the consuming application
- HTTPField / QueryItem: Precomputed name/value pairs
- HTTPRequest: Immutable outgoing request handed through the middleware chain
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional, Tuple

import httpx

# Header names
AUTHORIZATION = "Authorization"
USER_AGENT = "User-Agent"

# Query parameter names
PARAMETER_KEY = "key"
PARAMETER_SECRET = "secret"
PARAMETER_TOKEN = "token"


class AuthKind(str, Enum):
    """Supported authentication strategies."""

    NONE = "none"
    CONSUMER = "consumer"
    USER = "user"


@dataclass(frozen=True)
class AuthMethod:
    """
    Credentials used to authenticate requests.

    Build instances through the named constructors rather than directly:

        >>> AuthMethod.none()
        >>> AuthMethod.consumer(key="...", secret="...")
        >>> AuthMethod.user(token="...")

    Attributes:
        kind: Authentication strategy
        key: Consumer key (consumer only)
        secret: Consumer secret (consumer only)
        token: Personal user token (user only)
    """

    kind: AuthKind = AuthKind.NONE
    key: Optional[str] = None
    secret: Optional[str] = None
    token: Optional[str] = None

    @classmethod
    def none(cls) -> "AuthMethod":
        return cls(kind=AuthKind.NONE)

    @classmethod
    def consumer(cls, key: Optional[str], secret: Optional[str]) -> "AuthMethod":
        return cls(kind=AuthKind.CONSUMER, key=key, secret=secret)

    @classmethod
    def user(cls, token: Optional[str]) -> "AuthMethod":
        return cls(kind=AuthKind.USER, token=token)

    def __repr__(self) -> str:
        # Credentials stay out of reprs and logs.
        return f"AuthMethod({self.kind.value})"


class AuthTransport(str, Enum):
    """Placement of credentials in an outgoing request."""

    ON_HEADER = "header"
    ON_QUERY = "query"


@dataclass(frozen=True)
class Product:
    """
    Application identity used to build the User-Agent header.

    Attributes:
        name: Camel-cased product name, e.g. "SomeApp"
        version: Semantic version, e.g. "0.0.1"
        url: Link related to the product, e.g. "http://www.some.app"
    """

    name: Optional[str]
    version: Optional[str]
    url: Optional[str]


@dataclass(frozen=True)
class HTTPField:
    """A single header name/value pair."""

    name: str
    value: str


@dataclass(frozen=True)
class QueryItem:
    """A single query parameter name/value pair."""

    name: str
    value: str


@dataclass(frozen=True)
class HTTPRequest:
    """
    Outgoing request as seen by the middleware chain.

    The header collection keeps insertion order and allows repeated names.
    Middlewares never modify a request in place; they forward a copy
    built with with_path() / with_appended_field().

    Attributes:
        method: HTTP method
        scheme: URL scheme, e.g. "https"
        authority: Host and optional port, e.g. "api.discogs.com"
        path: Path including any query string, e.g. "/releases/1?page=2"
        header_fields: Request headers

    Requests compare by value but are not hashable, since httpx.Headers is
    mutable.
    """

    __hash__ = None

    method: str = "GET"
    scheme: Optional[str] = "https"
    authority: Optional[str] = None
    path: Optional[str] = "/"
    header_fields: httpx.Headers = field(default_factory=httpx.Headers)

    def with_path(self, path: Optional[str]) -> "HTTPRequest":
        """Return a copy of this request with a different path."""
        return replace(self, path=path)

    def with_appended_field(self, header: HTTPField) -> "HTTPRequest":
        """Return a copy of this request with one more header entry appended."""
        return replace(
            self, header_fields=append_header(self.header_fields, header)
        )


def append_header(headers: httpx.Headers, header: HTTPField) -> httpx.Headers:
    """
    Append a header entry to a copy of headers.

    Existing entries keep their order and are never replaced, even when
    they share the appended header's name.

    Args:
        headers: Existing headers (left untouched)
        header: Header to append

    Returns:
        New header collection ending with header
    """
    items: Iterable[Tuple[bytes, bytes]] = headers.raw
    return httpx.Headers(
        list(items) + [(header.name.encode("ascii"), header.value.encode("utf-8"))]
    )
