"""Pytest configuration and fixtures for wave-client tests."""

import asyncio
import copy
from typing import Any, Dict, List, Optional

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from wave_client.core.client import WaveClient
from wave_client.core.config import ClientConfig


SUCCESS_PAYLOAD: Dict[str, Any] = {
    "status": {"success": True, "httpstatuscode": 200},
    "statistics": {
        "pagetitle": "Example Page",
        "pageurl": "https://example.com",
        "time": 1234,
        "creditsremaining": 99,
        "allitemcount": 10,
        "totalelements": 100,
        "waveurl": "https://wave.webaim.org/report#/example.com",
    },
    "categories": {
        "error": {
            "alt_missing": {
                "id": "alt_missing",
                "description": "Missing alternative text",
                "count": 2,
                "selectors": ["img:nth-child(1)", "img:nth-child(2)"],
            },
        },
        "contrast": {
            "contrast": {
                "id": "contrast",
                "description": "Very low contrast",
                "count": 1,
                "contrastdata": [
                    {
                        "fcolor": "#777777",
                        "bcolor": "#999999",
                        "contrastratio": "1.63",
                        "fontsize": "16px",
                        "fontweight": "400",
                        "bold": False,
                        "algorithm": "WCAG2",
                    },
                ],
                "wcag": [
                    {"name": "1.4.3 Contrast (Minimum) (Level AA)", "link": "https://www.w3.org/WAI/WCAG21/quickref/#contrast-minimum"},
                ],
            },
        },
        "feature": {
            "alt": {"id": "alt", "description": "Alternative text", "count": 1},
        },
    },
}

FAILURE_PAYLOAD: Dict[str, Any] = {
    "status": {"success": False, "message": "Invalid API key", "code": "INVALID_KEY"},
}


class FakeWaveApi:
    """In-process stand-in for the WAVE ``/request`` endpoint."""

    def __init__(self):
        self.requests: List[Dict[str, str]] = []
        self.headers: List[Dict[str, str]] = []
        self.fetched: List[str] = []
        self.status = 200
        self.payload: Any = copy.deepcopy(SUCCESS_PAYLOAD)
        self.text: Optional[str] = None
        self.content_type = "application/json"
        self.delay = 0.0
        self.fetch_target = False
        self.events: Optional[List[Any]] = None
        self.base_url = ""

    async def handle(self, request: web.Request) -> web.Response:
        query = dict(request.query)
        self.requests.append(query)
        self.headers.append(dict(request.headers))
        if self.events is not None:
            self.events.append(("analyze", query.get("url")))

        if self.fetch_target:
            async with aiohttp.ClientSession() as session:
                async with session.get(query["url"]) as response:
                    self.fetched.append(await response.text())

        if self.delay:
            await asyncio.sleep(self.delay)

        if self.text is not None:
            return web.Response(status=self.status, text=self.text, content_type=self.content_type)
        return web.json_response(self.payload, status=self.status)


class FakeTunnel:
    def __init__(self, url: str, events: List[Any], close_error: Optional[Exception] = None):
        self._url = url
        self.events = events
        self.close_error = close_error
        self.closed = False

    def url(self) -> str:
        return self._url

    async def close(self) -> None:
        self.events.append("tunnel_close")
        self.closed = True
        if self.close_error:
            raise self.close_error


class FakeTunnelProvider:
    """Tunnel provider that forwards nothing.

    Without a fixed ``url`` the tunnel reports the local listener address,
    so whoever receives it can fetch the served page directly.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        events: Optional[List[Any]] = None,
        forward_error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
    ):
        self.fixed_url = url
        self.events = events if events is not None else []
        self.forward_error = forward_error
        self.close_error = close_error
        self.ports: List[int] = []
        self.tunnels: List[FakeTunnel] = []

    async def forward(self, port: int) -> FakeTunnel:
        self.ports.append(port)
        self.events.append(("forward", port))
        if self.forward_error:
            raise self.forward_error

        tunnel = FakeTunnel(
            self.fixed_url or f"http://127.0.0.1:{port}/",
            self.events,
            self.close_error,
        )
        self.tunnels.append(tunnel)
        return tunnel


@pytest.fixture
def success_payload() -> Dict[str, Any]:
    return copy.deepcopy(SUCCESS_PAYLOAD)


@pytest.fixture
def failure_payload() -> Dict[str, Any]:
    return copy.deepcopy(FAILURE_PAYLOAD)


@pytest.fixture
def tunnel_provider() -> FakeTunnelProvider:
    return FakeTunnelProvider()


@pytest.fixture
def no_settle_delay(monkeypatch):
    """Skip the pause between opening the tunnel and calling the API."""
    monkeypatch.setattr("wave_client.core.client.SETTLE_DELAY", 0)


@pytest_asyncio.fixture
async def wave_api():
    """Fake WAVE API served on a loopback port."""
    api = FakeWaveApi()
    app = web.Application()
    app.router.add_get("/api/request", api.handle)

    server = TestServer(app)
    await server.start_server()
    api.base_url = str(server.make_url("/api"))

    yield api

    await server.close()


@pytest.fixture
def client(wave_api, tunnel_provider) -> WaveClient:
    """Client pointed at the fake API."""
    return WaveClient(
        ClientConfig(api_key="test-api-key", base_url=wave_api.base_url, timeout=5.0),
        tunnel_provider=tunnel_provider,
    )
