from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import httpx
import orjson

from ..config.settings import ApiSettings
from ..core.errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class LitCalClient:
    """HTTP client for the liturgical calendar API.

    Every request carries ``Accept: application/json`` and the requested
    locale as ``Accept-Language``. The configured timeout is a deadline on the
    whole request, body included. Failures, including timeouts, surface as
    :class:`UpstreamError`.
    """

    settings: ApiSettings
    transport: Optional[httpx.BaseTransport] = None
    clock: Callable[[], float] = time.monotonic
    _client: Optional[httpx.Client] = field(default=None, init=False, repr=False)

    def ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout_seconds,
                transport=self.transport,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def fetch(self, path: str, locale: Optional[str] = None) -> Any:
        headers = {
            "Accept": "application/json",
            "Accept-Language": locale or self.settings.default_locale,
        }
        logger.debug("GET %s%s (%s)", self.settings.base_url, path, headers["Accept-Language"])
        # httpx timeouts apply per phase; the deadline bounds the whole request.
        deadline = self.clock() + self.settings.timeout_seconds
        try:
            with self.ensure_client().stream("GET", path, headers=headers) as response:
                body = self._read_body(response, deadline, path)
        except httpx.TimeoutException as exc:
            logger.warning("Request to %s timed out", path)
            raise self._timeout_error() from exc
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", path, exc)
            raise UpstreamError(f"API request failed: {exc}") from exc

        if not response.is_success:
            logger.warning("Request to %s returned HTTP %s", path, response.status_code)
            text = body.decode(response.charset_encoding or "utf-8", errors="replace")
            raise UpstreamError(
                f"API Error: {response.status_code} - {text}",
                status_code=response.status_code,
            )
        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as exc:
            raise UpstreamError("API returned a response that is not valid JSON") from exc

    def _read_body(self, response: httpx.Response, deadline: float, path: str) -> bytes:
        chunks = []
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            self._check_deadline(deadline, path)
        self._check_deadline(deadline, path)
        return b"".join(chunks)

    def _check_deadline(self, deadline: float, path: str) -> None:
        if self.clock() > deadline:
            logger.warning("Request to %s passed its %gs deadline", path, self.settings.timeout_seconds)
            raise self._timeout_error()

    def _timeout_error(self) -> UpstreamError:
        return UpstreamError(f"API request timed out after {self.settings.timeout_seconds:g} seconds")

    def fetch_general_calendar(self, year: int, locale: Optional[str] = None) -> Any:
        return self.fetch(f"/calendar/{year}", locale)

    def fetch_national_calendar(self, nation: str, year: int, locale: Optional[str] = None) -> Any:
        return self.fetch(f"/calendar/nation/{nation}/{year}", locale)

    def fetch_diocesan_calendar(self, diocese: str, year: int, locale: Optional[str] = None) -> Any:
        return self.fetch(f"/calendar/diocese/{diocese}/{year}", locale)

    def fetch_available_calendars(self) -> Any:
        return self.fetch("/calendars")

    def fetch_liturgical_events(
        self,
        calendar_type: str = "general",
        nation: Optional[str] = None,
        diocese: Optional[str] = None,
    ) -> Any:
        path = "/events"
        if calendar_type == "national" and nation:
            path += f"/nation/{nation}"
        elif calendar_type == "diocesan" and diocese:
            path += f"/diocese/{diocese}"
        return self.fetch(path)
