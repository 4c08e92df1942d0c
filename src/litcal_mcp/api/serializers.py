from __future__ import annotations

from typing import Any, Dict, Union

import orjson
from pydantic import BaseModel

from ..domain import CalendarListing, CalendarResponse, ErrorResult, EventsResponse
from .models import CalendarListingPayload, CalendarResponsePayload, ErrorPayload, EventsResponsePayload

DomainResult = Union[CalendarResponse, EventsResponse, CalendarListing, ErrorResult]

_PAYLOADS = {
    CalendarResponse: CalendarResponsePayload,
    EventsResponse: EventsResponsePayload,
    CalendarListing: CalendarListingPayload,
    ErrorResult: ErrorPayload,
}


def to_payload(result: DomainResult) -> BaseModel:
    return _PAYLOADS[type(result)].from_domain(result)


def dump_json(data: Union[BaseModel, Dict[str, Any]]) -> str:
    if isinstance(data, BaseModel):
        data = data.model_dump()
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")


def serialize_result(result: DomainResult) -> str:
    return dump_json(to_payload(result))


def serialize_error(message: str) -> str:
    return dump_json(ErrorPayload(error=message))
