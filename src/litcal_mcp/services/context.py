from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import LitCalClient, ResponseCache


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, the API client, and the cache."""

    settings: AppSettings = field(default_factory=get_settings)
    client: LitCalClient = field(init=False)
    cache: ResponseCache = field(init=False)

    def __post_init__(self) -> None:
        self.client = LitCalClient(self.settings.api)
        self.cache = ResponseCache(ttl=self.settings.cache.ttl)
