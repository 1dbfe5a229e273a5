# -*- coding: utf-8 -*-

"""
Integration tests for complete end-to-end flow.
Builds a client with create_client() and checks what reaches the wire.
"""

import asyncio
from unittest.mock import patch

import pytest

from discogs_service import (
    AuthMethod,
    AuthTransport,
    InputValidationError,
    InputValidationReason,
    Product,
    create_client,
)


class TestFullClientFlow:
    """Integration tests for requests sent through create_client()."""

    @pytest.mark.asyncio
    async def test_consumer_on_header(
        self, product, consumer_key, consumer_secret, mock_transport, captured_requests
    ):
        """
        What it does: Checks that a request carries Authorization and User-Agent headers.
        Goal: Ensure both middlewares run and only one User-Agent is sent.
        """
        client = create_client(
            product,
            method=AuthMethod.consumer(key=consumer_key, secret=consumer_secret),
            transport=AuthTransport.ON_HEADER,
            inner_transport=mock_transport,
        )

        print("Action: Sending GET /releases/249504...")
        async with client:
            response = await client.get("/releases/249504", headers={"Accept": "application/json"})

        assert response.status_code == 200
        sent = captured_requests[0]
        print(f"Sent headers: {sent.headers.multi_items()}")
        assert str(sent.url) == "https://api.discogs.com/releases/249504"
        assert sent.headers.get_list("Authorization") == [
            f"Discogs key={consumer_key}, secret={consumer_secret}"
        ]
        assert sent.headers.get_list("User-Agent") == ["SomeApp/0.0.1 +http://www.some.app"]
        assert sent.headers["Accept"] == "application/json"

        names = [name for name, _ in sent.headers.multi_items()]
        assert names.index("authorization") < names.index("user-agent")

    @pytest.mark.asyncio
    async def test_user_on_query(self, product, user_token, mock_transport, captured_requests):
        """
        What it does: Checks that the token is appended to the existing query.
        Goal: Ensure query placement keeps caller parameters first and adds no header.
        """
        client = create_client(
            product,
            method=AuthMethod.user(token=user_token),
            transport=AuthTransport.ON_QUERY,
            base_url="https://api.discogs.com",
            inner_transport=mock_transport,
        )

        async with client:
            await client.get("/database/search", params={"q": "nirvana", "type": "release"})

        sent = captured_requests[0]
        print(f"Sent URL: {sent.url}")
        assert sent.url.raw_path.decode("ascii") == (
            f"/database/search?q=nirvana&type=release&token={user_token}"
        )
        assert "Authorization" not in sent.headers

    @pytest.mark.asyncio
    async def test_no_auth(self, product, mock_transport, captured_requests):
        """
        What it does: Checks that AuthMethod.none() sends only the User-Agent.
        Goal: Anonymous requests stay untouched apart from identification.
        """
        client = create_client(
            product,
            method=AuthMethod.none(),
            transport=AuthTransport.ON_QUERY,
            inner_transport=mock_transport,
        )

        async with client:
            await client.get("/artists/1?page=2")

        sent = captured_requests[0]
        assert sent.url.raw_path == b"/artists/1?page=2"
        assert "Authorization" not in sent.headers
        assert sent.headers["User-Agent"] == "SomeApp/0.0.1 +http://www.some.app"

    def test_invalid_credentials_fail_before_client_exists(self, product, mock_transport):
        """
        What it does: Checks that create_client() raises for a malformed token.
        Goal: No client is ever built with unvalidated credentials.
        """
        with pytest.raises(InputValidationError) as exc_info:
            create_client(
                product,
                method=AuthMethod.user(token="short"),
                transport=AuthTransport.ON_HEADER,
                inner_transport=mock_transport,
            )

        assert exc_info.value.reason == InputValidationReason.INPUT_NOT_USER_TOKEN

    def test_invalid_product_fails_before_client_exists(self, mock_transport):
        """
        What it does: Checks that create_client() raises for a malformed product.
        Goal: Product validation runs at construction time.
        """
        with pytest.raises(InputValidationError) as exc_info:
            create_client(
                Product(name="SomeApp", version="1.0", url="http://www.some.app"),
                method=AuthMethod.none(),
                transport=AuthTransport.ON_HEADER,
                inner_transport=mock_transport,
            )

        assert exc_info.value.reason == InputValidationReason.INPUT_NOT_SEMANTIC_VERSION

    @pytest.mark.asyncio
    async def test_falls_back_to_configuration(
        self, product, user_token, mock_transport, captured_requests
    ):
        """
        What it does: Checks that method and transport come from configuration when omitted.
        Goal: Environment-configured credentials are picked up.
        """
        with patch(
            "discogs_service.client.resolve_auth_method",
            return_value=AuthMethod.user(token=user_token),
        ), patch(
            "discogs_service.client.resolve_auth_transport",
            return_value=AuthTransport.ON_HEADER,
        ):
            client = create_client(product, inner_transport=mock_transport)

        async with client:
            await client.get("/oauth/identity")

        assert captured_requests[0].headers["Authorization"] == f"Discogs token={user_token}"

    @pytest.mark.asyncio
    async def test_concurrent_requests_share_middlewares(
        self, product, user_token, mock_transport, captured_requests
    ):
        """
        What it does: Checks that concurrent requests each get exactly one credential.
        Goal: Middlewares hold no per-request state.
        """
        client = create_client(
            product,
            method=AuthMethod.user(token=user_token),
            transport=AuthTransport.ON_HEADER,
            inner_transport=mock_transport,
        )

        async with client:
            await asyncio.gather(*(client.get(f"/releases/{i}") for i in range(10)))

        assert len(captured_requests) == 10
        for sent in captured_requests:
            assert sent.headers.get_list("Authorization") == [f"Discogs token={user_token}"]

    @pytest.mark.asyncio
    async def test_caller_user_agent_kept(self, product, mock_transport, captured_requests):
        """
        What it does: Checks that a User-Agent passed via client headers survives.
        Goal: Only httpx's default is dropped; the product entry is appended after the caller's.
        """
        client = create_client(
            product,
            method=AuthMethod.none(),
            transport=AuthTransport.ON_HEADER,
            inner_transport=mock_transport,
            headers={"User-Agent": "Caller/2.0"},
        )

        async with client:
            await client.get("/releases/1")

        sent = captured_requests[0]
        assert sent.headers.get_list("User-Agent") == [
            "Caller/2.0",
            "SomeApp/0.0.1 +http://www.some.app",
        ]

    @pytest.mark.asyncio
    async def test_transport_given_as_string(self, product, user_token, mock_transport, captured_requests):
        """
        What it does: Checks that create_client() accepts "query" for the transport.
        Goal: Plain strings behave like AuthTransport members.
        """
        client = create_client(
            product,
            method=AuthMethod.user(token=user_token),
            transport="query",
            inner_transport=mock_transport,
        )

        async with client:
            await client.get("/releases/1")

        assert captured_requests[0].url.raw_path.decode("ascii") == f"/releases/1?token={user_token}"
