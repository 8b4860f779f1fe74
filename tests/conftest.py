"""Shared fixtures: a mocked eBird upstream and helpers to drive the MCP server."""

import asyncio
from typing import Any, Callable, Optional

import httpx
import pytest
from fastmcp import Client, FastMCP

from core.client import EBirdClient
from core.config import Settings

TEST_API_KEY = "test-token"
TEST_BASE_URL = "https://api.ebird.org/v2"


class UpstreamRecorder:
    """Stands in for api.ebird.org: records every request, answers with `responder`."""

    def __init__(self, responder: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: list[httpx.Request] = []
        self.responder = responder or (lambda request: httpx.Response(200, json=[]))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def echo_query(request: httpx.Request) -> httpx.Response:
    """Upstream that answers with the query parameters it received."""
    return httpx.Response(200, json=dict(request.url.params))


def call_tool(server: FastMCP, name: str, arguments: dict[str, Any]):
    async def _run():
        async with Client(server) as client:
            return await client.call_tool(name, arguments)

    return asyncio.run(_run())


def list_tool_names(server: FastMCP) -> set[str]:
    async def _run():
        async with Client(server) as client:
            return [tool.name for tool in await client.list_tools()]

    return set(asyncio.run(_run()))


def list_tool_schemas(server: FastMCP) -> dict[str, dict[str, Any]]:
    async def _run():
        async with Client(server) as client:
            return {tool.name: tool.inputSchema for tool in await client.list_tools()}

    return asyncio.run(_run())


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def upstream() -> UpstreamRecorder:
    return UpstreamRecorder()


@pytest.fixture
def client(settings, upstream) -> EBirdClient:
    return EBirdClient(settings, transport=httpx.MockTransport(upstream))


@pytest.fixture
def server(client) -> FastMCP:
    from tools.mcp_server import create_server

    return create_server(client)
