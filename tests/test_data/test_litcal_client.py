"""Tests for the upstream HTTP client using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from litcal_mcp.core import UpstreamError
from litcal_mcp.data import LitCalClient


def test_general_calendar_sends_json_and_locale_headers(client, upstream) -> None:
    upstream.add_json("/calendar/2026", {"litcal": [], "settings": {"year": 2026}})

    payload = client.fetch_general_calendar(2026, "it")

    assert payload == {"litcal": [], "settings": {"year": 2026}}
    (request,) = upstream.requests
    assert request.method == "GET"
    assert str(request.url) == "https://litcal.test/api/dev/calendar/2026"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Accept-Language"] == "it"


def test_default_locale_is_used(client, upstream) -> None:
    upstream.add_json("/calendars", {"litcal_metadata": {}})

    client.fetch_available_calendars()

    assert upstream.requests[0].headers["Accept-Language"] == "en"


@pytest.mark.parametrize(
    ("call", "path"),
    [
        (lambda c: c.fetch_national_calendar("US", 2025), "/api/dev/calendar/nation/US/2025"),
        (lambda c: c.fetch_diocesan_calendar("ROME-IT", 2025), "/api/dev/calendar/diocese/ROME-IT/2025"),
        (lambda c: c.fetch_liturgical_events(), "/api/dev/events"),
        (lambda c: c.fetch_liturgical_events("national", nation="IT"), "/api/dev/events/nation/IT"),
        (lambda c: c.fetch_liturgical_events("diocesan", diocese="BOSTON-US"), "/api/dev/events/diocese/BOSTON-US"),
        (lambda c: c.fetch_liturgical_events("national"), "/api/dev/events"),
    ],
)
def test_endpoint_paths(client, upstream, call, path) -> None:
    upstream.add_handler(path.removeprefix("/api/dev"), lambda request: httpx.Response(200, json={}))

    call(client)

    assert upstream.paths() == [path]


def test_error_status_raises_upstream_error(client, upstream) -> None:
    upstream.add_handler("/calendar/2026", lambda request: httpx.Response(503, text="maintenance"))

    with pytest.raises(UpstreamError, match="API Error: 503 - maintenance") as excinfo:
        client.fetch_general_calendar(2026)

    assert excinfo.value.status_code == 503


def test_timeout_raises_upstream_error(client, upstream) -> None:
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    upstream.add_handler("/calendar/2026", slow)

    with pytest.raises(UpstreamError, match="timed out after 30 seconds"):
        client.fetch_general_calendar(2026)


def test_connection_failure_raises_upstream_error(client, upstream) -> None:
    def refused(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    upstream.add_handler("/calendars", refused)

    with pytest.raises(UpstreamError, match="API request failed"):
        client.fetch_available_calendars()


def test_invalid_json_raises_upstream_error(client, upstream) -> None:
    upstream.add_handler("/calendars", lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(UpstreamError, match="not valid JSON"):
        client.fetch_available_calendars()


class TricklingBody(httpx.SyncByteStream):
    """Body that takes ``seconds_per_chunk`` of fake time for every chunk."""

    def __init__(self, clock, chunks: list[bytes], seconds_per_chunk: float) -> None:
        self.clock = clock
        self.chunks = chunks
        self.seconds_per_chunk = seconds_per_chunk

    def __iter__(self):
        for chunk in self.chunks:
            self.clock.advance(self.seconds_per_chunk)
            yield chunk


def _clocked_client(settings, upstream, clock) -> LitCalClient:
    return LitCalClient(settings.api, transport=httpx.MockTransport(upstream), clock=clock)


def test_slow_body_hits_the_whole_request_deadline(settings, upstream, clock) -> None:
    chunks = [b'{"litcal_metadata": ', b"{}", b"}"]
    upstream.add_handler("/calendars", lambda request: httpx.Response(200, stream=TricklingBody(clock, chunks, 12)))
    litcal_client = _clocked_client(settings, upstream, clock)

    with pytest.raises(UpstreamError, match="timed out after 30 seconds"):
        litcal_client.fetch_available_calendars()
    litcal_client.close()


def test_body_within_deadline_is_parsed(settings, upstream, clock) -> None:
    chunks = [b'{"litcal_metadata": ', b"{}", b"}"]
    upstream.add_handler("/calendars", lambda request: httpx.Response(200, stream=TricklingBody(clock, chunks, 9)))
    litcal_client = _clocked_client(settings, upstream, clock)

    assert litcal_client.fetch_available_calendars() == {"litcal_metadata": {}}
    litcal_client.close()
