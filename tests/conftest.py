"""Shared fixtures: settings, a routed mock upstream, and a patched tool state."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Dict, List

import httpx
import pytest

from litcal_mcp.api import api_state
from litcal_mcp.config import ApiSettings, AppSettings, CacheSettings, LogSettings
from litcal_mcp.data import LitCalClient, ResponseCache
from litcal_mcp.services import CalendarService, ServiceContext

BASE_URL = "https://litcal.test/api/dev"


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class UpstreamStub:
    """Routes upstream paths to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add_json(self, path: str, payload: Any, status_code: int = 200) -> None:
        self.routes[path] = lambda request: httpx.Response(status_code, json=payload)

    def add_handler(self, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[path] = handler

    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/dev")
        handler = self.routes.get(path)
        if handler is None:
            return httpx.Response(404, text=f"no route for {path}")
        return handler(request)


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(
        api=ApiSettings(base_url=BASE_URL, timeout_seconds=30.0, default_locale="en"),
        cache=CacheSettings(ttl=timedelta(minutes=60)),
        logging=LogSettings(level="DEBUG", directory=tmp_path),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
def client(settings: AppSettings, upstream: UpstreamStub) -> LitCalClient:
    litcal_client = LitCalClient(settings.api, transport=httpx.MockTransport(upstream))
    yield litcal_client
    litcal_client.close()


@pytest.fixture
def calendar_service(settings: AppSettings, client: LitCalClient, clock: FakeClock) -> CalendarService:
    context = ServiceContext(settings=settings)
    context.client = client
    context.cache = ResponseCache(ttl=settings.cache.ttl, clock=clock)
    return CalendarService(context)


@pytest.fixture
def tool_state(monkeypatch: pytest.MonkeyPatch, calendar_service: CalendarService) -> CalendarService:
    """Point the registered tools at the mocked upstream."""
    monkeypatch.setattr(api_state, "calendar", calendar_service)
    return calendar_service
