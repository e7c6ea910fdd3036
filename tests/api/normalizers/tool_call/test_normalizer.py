"""Testes do pipeline completo de normalização de envelopes."""

from __future__ import annotations

import json
from typing import Any

import pytest

from api.normalizers.tool_call import (
    ArgumentParseError,
    UnknownEnvelopeError,
    normalize_envelope,
)
from api.validators.tool_call import ValidationError
from app.domain.appointment import MeetingRequest

ARGS = {"name": "Alice", "date": "2025-03-10", "time": "14:00", "title": "Sync"}
EXPECTED = MeetingRequest(name="Alice", date="2025-03-10", time="14:00", title="Sync")


def _tool_call(arguments: Any) -> dict[str, Any]:
    return {"id": "tc1", "function": {"name": "createEvent", "arguments": arguments}}


def _all_shapes(arguments: Any) -> list[dict[str, Any]]:
    return [
        {"assistant": {"toolCalls": [_tool_call(arguments)]}},
        {"message": {"toolCalls": [_tool_call(arguments)]}},
        {"message": {"toolCallList": [_tool_call(arguments)]}},
        {"message": {"tool_calls": [_tool_call(arguments)]}},
        {"toolCalls": [_tool_call(arguments)]},
        {"tool_calls": [_tool_call(arguments)]},
    ]


@pytest.mark.parametrize("body", [*_all_shapes(json.dumps(ARGS)), *_all_shapes(ARGS), dict(ARGS)])
def test_every_shape_yields_identical_request(body: dict[str, Any]) -> None:
    assert normalize_envelope(body).request == EXPECTED


def test_nested_shape_keeps_tool_call_id() -> None:
    normalized = normalize_envelope({"message": {"toolCalls": [_tool_call(ARGS)]}})

    assert normalized.tool_call_id == "tc1"
    assert normalized.shape == "message.toolCalls"


def test_unknown_shape_raises() -> None:
    with pytest.raises(UnknownEnvelopeError):
        normalize_envelope({})


def test_priority_prefers_tool_call_over_flat_fields() -> None:
    body = {
        "assistant": {"toolCalls": [_tool_call(json.dumps(ARGS))]},
        "name": "Mallory",
        "date": "2031-12-31",
        "time": "07:00",
    }

    normalized = normalize_envelope(body)

    assert normalized.shape == "assistant.toolCalls"
    assert normalized.request.name == "Alice"


def test_fields_are_trimmed() -> None:
    normalized = normalize_envelope(
        {"name": "  Alice  ", "date": " 2025-03-10 ", "time": "14:00\t", "title": "  Sync "}
    )

    assert normalized.request == EXPECTED


def test_missing_title_stays_absent() -> None:
    normalized = normalize_envelope({"name": "Alice", "date": "2025-03-10", "time": "14:00"})

    assert normalized.request.title is None


def test_invalid_arguments_json_raises_with_tool_call_id() -> None:
    body = {"message": {"toolCalls": [_tool_call('{"name":"Eve","date":"2025-03-10",}')]}}

    with pytest.raises(ArgumentParseError) as exc_info:
        normalize_envelope(body)

    assert exc_info.value.tool_call_id == "tc1"


@pytest.mark.parametrize(
    ("arguments", "field", "message"),
    [
        ({"date": "2025-03-10", "time": "14:00"}, "name", "Missing required field: name"),
        ({"name": "   ", "date": "2025-03-10", "time": "14:00"}, "name", "Missing required field: name"),
        ({"name": "A", "time": "14:00"}, "date", "Missing required field: date"),
        (
            {"name": "A", "date": "2024-1-5", "time": "14:00"},
            "date",
            "Invalid date format. Expected YYYY-MM-DD",
        ),
        ({"name": "A", "date": "2025-03-10"}, "time", "Missing required field: time"),
        (
            {"name": "A", "date": "2025-03-10", "time": "2:00"},
            "time",
            "Invalid time format. Expected HH:MM (24-hour)",
        ),
        ({"date": "bad", "time": "bad"}, "name", "Missing required field: name"),
    ],
)
def test_validation_errors_report_first_failing_field(
    arguments: dict[str, Any],
    field: str,
    message: str,
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        normalize_envelope({"toolCalls": [_tool_call(json.dumps(arguments))]})

    assert exc_info.value.field == field
    assert exc_info.value.message == message
    assert exc_info.value.tool_call_id == "tc1"


def test_out_of_range_time_passes_normalizer() -> None:
    normalized = normalize_envelope({"name": "A", "date": "2025-03-10", "time": "25:00"})

    assert normalized.request.time == "25:00"


def test_numeric_values_are_coerced_to_text() -> None:
    normalized = normalize_envelope({"name": 42, "date": "2025-03-10", "time": "14:00"})

    assert normalized.request.name == "42"
