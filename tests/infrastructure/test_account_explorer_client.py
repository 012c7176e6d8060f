"""Tests for the account explorer HTTP adapter."""

import asyncio
import json

import httpx
import pytest

from xrpl_wallet.domain.constants import CONNECTION_FAILURE_MESSAGE
from xrpl_wallet.domain.errors import ConnectionFailure
from xrpl_wallet.domain.models import ExplorerResponse
from xrpl_wallet.infrastructure.account_explorer_client import (
    HttpAccountExplorerClient,
)

BASE_URL = "http://explorer.test/api"


def _explore(handler, fake_logger, address: str = "rExample") -> ExplorerResponse:
    async def _run() -> ExplorerResponse:
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as client:
            explorer = HttpAccountExplorerClient(
                BASE_URL,
                client=client,
                logger=fake_logger,
            )
            return await explorer.explore(address)

    return asyncio.run(_run())


def test_explore_posts_address_as_json(fake_logger) -> None:
    """The address should be posted to /explore with JSON headers."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["Content-Type"]
        seen["accept"] = request.headers["Accept"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, text='{"address": "rExample"}')

    response = _explore(handler, fake_logger, address="rExample")

    assert seen == {
        "method": "POST",
        "url": "http://explorer.test/api/explore",
        "content_type": "application/json",
        "accept": "application/json",
        "body": {"address": "rExample"},
    }
    assert response == ExplorerResponse(
        status=200,
        raw_body='{"address": "rExample"}',
    )


def test_explore_returns_error_status_without_raising(fake_logger) -> None:
    """Non-2xx replies are returned as-is for the decoder."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, text='{"message": "bad address"}')

    response = _explore(handler, fake_logger)

    assert response.status == 400
    assert response.ok is False
    assert response.raw_body == '{"message": "bad address"}'


@pytest.mark.parametrize(
    "error_type",
    [httpx.ConnectError, httpx.ReadTimeout, httpx.RemoteProtocolError],
)
def test_explore_wraps_transport_errors(fake_logger, error_type) -> None:
    """Transport failures should surface as ConnectionFailure."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise error_type("boom", request=request)

    with pytest.raises(ConnectionFailure) as excinfo:
        _explore(handler, fake_logger)

    assert excinfo.value.message == CONNECTION_FAILURE_MESSAGE
    fake_logger.error.assert_called_once()


def test_explore_wraps_unusable_url(fake_logger) -> None:
    """A base URL without a usable scheme is a connection failure."""

    async def _run() -> None:
        explorer = HttpAccountExplorerClient(
            "not-a-url",
            timeout=0.1,
            logger=fake_logger,
        )
        await explorer.explore("rExample")

    with pytest.raises(ConnectionFailure):
        asyncio.run(_run())


def test_explore_rejects_empty_address(fake_logger) -> None:
    """Empty addresses never reach the network."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(ValueError):
        _explore(handler, fake_logger, address="")


def test_url_joins_base_without_double_slash(fake_logger) -> None:
    """Trailing slashes on the base URL should be ignored."""
    explorer = HttpAccountExplorerClient(
        "http://explorer.test/api/",
        logger=fake_logger,
    )
    assert explorer.url == "http://explorer.test/api/explore"
