from __future__ import annotations

from typing import Optional


class LitCalError(RuntimeError):
    """Base class for errors reported back to tool callers as ``{"error": ...}``."""


class ValidationError(LitCalError, ValueError):
    """Raised when a tool argument cannot be used, e.g. a year out of range."""


class UpstreamError(LitCalError):
    """Raised when the liturgical calendar API fails or times out."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedDataError(LitCalError):
    """Raised when an upstream payload does not have the expected structure."""
