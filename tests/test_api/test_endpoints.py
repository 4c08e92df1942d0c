"""End-to-end tests for the five tools against a mocked upstream."""

from __future__ import annotations

import json

import httpx
import pytest

from litcal_mcp.api import call_api

CALENDAR_2026 = {
    "litcal": {
        "MaryMotherOfGod": {"event_key": "MaryMotherOfGod", "name": "Mary, Mother of God", "date": 1767225600,
                            "grade": 6, "color": ["white"], "common": [], "liturgical_year": "YEAR A"},
        "StBasil": {"event_key": "StBasil", "name": "Saints Basil and Gregory", "date": "2026-01-02T00:00:00+00:00",
                    "grade": 3, "color": ["white"], "common": ["Pastors", "Doctors"]},
        "StAngela": {"event_key": "StAngela", "name": "Saint Angela Merici", "date": "2026-01-27T00:00:00+00:00",
                     "grade": 2, "color": ["white"], "common": ["Virgins"]},
        "StJoseph": {"event_key": "StJoseph", "name": "Saint Joseph", "date": "2026-03-19T00:00:00+00:00",
                     "grade": 6, "color": ["white"], "common": []},
    },
    "settings": {"year": 2026, "locale": "en", "national_calendar": None, "diocesan_calendar": None},
    "metadata": {},
    "messages": [],
}


def _call(name: str, **arguments) -> dict:
    return json.loads(call_api(name, **arguments))


def test_general_calendar_normalizes_and_filters(tool_state, upstream) -> None:
    upstream.add_json("/calendar/2026", CALENDAR_2026)

    result = _call("get_general_calendar", year="2026", month="1", grade="2,3")

    assert [event["name"] for event in result["events"]] == ["Saints Basil and Gregory", "Saint Angela Merici"]
    assert result["metadata"] == {
        "locale": "en",
        "national_calendar": None,
        "diocesan_calendar": None,
        "year": 2026,
        "total_events": 2,
        "filters_applied": {"month": 1, "grades": [2, 3]},
    }
    assert result["events"][0] == {
        "name": "Saints Basil and Gregory",
        "date": "2026-01-02",
        "grade": 3,
        "grade_name": "Memorial",
        "color": ["white"],
        "common": ["Pastors", "Doctors"],
        "liturgical_year": None,
    }


def test_general_calendar_accepts_numeric_arguments(tool_state, upstream) -> None:
    upstream.add_json("/calendar/2026", CALENDAR_2026)

    result = _call("get_general_calendar", year=2026, month=1, grade=6)

    assert [event["date"] for event in result["events"]] == ["2026-01-01"]


def test_repeated_calls_hit_the_cache(tool_state, upstream) -> None:
    upstream.add_json("/calendar/2026", CALENDAR_2026)

    first = call_api("get_general_calendar", year="2026")
    second = call_api("get_general_calendar", year="2026")

    assert first == second
    assert len(upstream.requests) == 1


def test_locale_is_part_of_the_cache_key(tool_state, upstream) -> None:
    upstream.add_json("/calendar/2026", CALENDAR_2026)

    call_api("get_general_calendar", year="2026", locale="en")
    call_api("get_general_calendar", year="2026", locale="it")

    assert [request.headers["Accept-Language"] for request in upstream.requests] == ["en", "it"]


def test_invalid_year_is_reported_without_calling_upstream(tool_state, upstream) -> None:
    assert _call("get_general_calendar", year="1969") == {"error": "Year must be between 1970 and 9999"}
    assert upstream.requests == []


def test_upstream_failure_becomes_error_payload(tool_state, upstream) -> None:
    upstream.add_handler("/calendar/2026", lambda request: httpx.Response(500, text="boom"))

    assert _call("get_general_calendar", year="2026") == {"error": "API Error: 500 - boom"}


def test_missing_litcal_becomes_error_payload(tool_state, upstream) -> None:
    upstream.add_json("/calendar/2026", {"settings": {}})

    assert _call("get_general_calendar", year="2026") == {"error": "No calendar data available"}


def test_national_calendar_upper_cases_nation(tool_state, upstream) -> None:
    upstream.add_json("/calendar/nation/US/2026", {**CALENDAR_2026, "settings": {"national_calendar": "US"}})

    result = _call("get_national_calendar", nation=" us ", year="2026")

    assert upstream.paths() == ["/api/dev/calendar/nation/US/2026"]
    assert result["metadata"]["national_calendar"] == "US"
    assert result["metadata"]["total_events"] == 4


@pytest.mark.parametrize("nation", [None, "", "   "])
def test_national_calendar_requires_nation(tool_state, upstream, nation) -> None:
    result = _call("get_national_calendar", nation=nation, year="2026")

    assert result == {"error": "Nation code is required (e.g., IT, US, NL, VA, CA)"}
    assert upstream.requests == []


def test_diocesan_calendar(tool_state, upstream) -> None:
    upstream.add_json("/calendar/diocese/BOSTON-US/2026", CALENDAR_2026)

    result = _call("get_diocesan_calendar", diocese="BOSTON-US", year="2026", month="3")

    assert [event["name"] for event in result["events"]] == ["Saint Joseph"]


def test_diocesan_calendar_requires_diocese(tool_state) -> None:
    assert _call("get_diocesan_calendar") == {"error": "Diocese code is required (e.g., ROME-IT, BOSTON-US)"}


def test_list_available_calendars(tool_state, upstream) -> None:
    upstream.add_json(
        "/calendars",
        {
            "litcal_metadata": {
                "national_calendars": [{"calendar_id": "VA", "locales": ["it_VA"], "settings": {}}],
                "diocesan_calendars": [
                    {"calendar_id": "BOSTON-US", "diocese": "Archdiocese of Boston", "nation": "US",
                     "locales": ["en_US"]},
                ],
            }
        },
    )

    result = _call("list_available_calendars")

    assert result == {
        "national_calendars": [{"calendar_id": "VA", "locales": ["it_VA"]}],
        "diocesan_calendars": [
            {"calendar_id": "BOSTON-US", "diocese": "Archdiocese of Boston", "nation": "US", "locales": ["en_US"]}
        ],
        "total": 2,
    }


def test_liturgical_events_for_nation(tool_state, upstream) -> None:
    upstream.add_json(
        "/events/nation/IT",
        {"litcal_events": {"StFrancis": {"name": "Saint Francis of Assisi", "grade": 6}, "StClare": {"grade": 3}}},
    )

    result = _call("get_liturgical_events", calendarType="national", nation="it", grade="6")

    assert result == {
        "calendar_type": "national",
        "nation": "IT",
        "diocese": None,
        "filters_applied": {"grades": [6]},
        "total_events": 1,
        "events": [
            {
                "event_key": "StFrancis",
                "name": "Saint Francis of Assisi",
                "grade": 6,
                "grade_name": "Solemnity",
                "color": None,
                "common": None,
                "date": None,
                "liturgical_year": None,
            }
        ],
    }


def test_liturgical_events_default_to_general(tool_state, upstream) -> None:
    upstream.add_json("/events", {"litcal_events": {"Easter": {"name": "Easter", "grade": 7}}})

    result = _call("get_liturgical_events")

    assert result["calendar_type"] == "general"
    assert result["total_events"] == 1


def test_liturgical_events_validate_calendar_type(tool_state, upstream) -> None:
    assert _call("get_liturgical_events", calendarType="parish") == {
        "error": "calendarType must be one of: general, national, diocesan"
    }
    assert _call("get_liturgical_events", calendarType="diocesan") == {
        "error": "Diocese code is required (e.g., ROME-IT, BOSTON-US)"
    }
    assert upstream.requests == []
