"""Tests for the console's event rendering (needs the optional "agent" extra)."""

from types import SimpleNamespace

import pytest

pytest.importorskip("google.adk")
pytest.importorskip("litellm")

from main import describe_event_error, describe_tool_call, describe_tool_response


class TestDescribeToolCall:
    def test_shows_name_and_arguments(self):
        call = SimpleNamespace(name="get_recent_observations", args={"region_code": "US-NY", "back": 7})

        assert describe_tool_call(call) == (
            "🔧 Calling tool: get_recent_observations(region_code='US-NY', back=7)"
        )

    def test_no_arguments(self):
        call = SimpleNamespace(name="get_taxa_locales", args=None)

        assert describe_tool_call(call) == "🔧 Calling tool: get_taxa_locales()"

    def test_long_argument_is_shortened(self):
        call = SimpleNamespace(name="get_taxonomy", args={"species": "cangoo," * 20})

        line = describe_tool_call(call)

        assert line.endswith("...)")
        assert len(line) < 100


class TestDescribeToolResponse:
    def test_error_result_shows_the_message(self):
        response = SimpleNamespace(
            name="get_checklist",
            response={
                "content": [{"type": "text", "text": "eBird API error: 404 Not Found"}],
                "isError": True,
            },
        )

        assert describe_tool_response(response) == (
            "❌ get_checklist failed: eBird API error: 404 Not Found"
        )

    def test_success_is_confirmed_without_the_payload(self):
        response = SimpleNamespace(
            name="get_hotspot_info",
            response={"content": [{"type": "text", "text": '{"locId": "L99381"}'}], "isError": False},
        )

        assert describe_tool_response(response) == "📥 get_hotspot_info returned data"


class TestDescribeEventError:
    def test_event_without_error(self):
        assert describe_event_error(SimpleNamespace(error_code=None, error_message=None)) is None

    def test_event_with_error(self):
        event = SimpleNamespace(error_code="RATE_LIMIT", error_message="Too many requests")

        assert describe_event_error(event) == "⚠️  Model error (RATE_LIMIT): Too many requests"

    def test_event_missing_error_fields(self):
        assert describe_event_error(SimpleNamespace()) is None
