"""Testes da sanitização de argumentos."""

from __future__ import annotations

from api.normalizers.tool_call import SanitizedFields, sanitize_arguments


def test_sanitize_trims_required_fields() -> None:
    fields = sanitize_arguments({"name": "  Alice  ", "date": "2025-03-10 ", "time": " 09:30"})

    assert fields == SanitizedFields(name="Alice", date="2025-03-10", time="09:30", title=None)


def test_sanitize_turns_missing_and_null_into_empty_text() -> None:
    fields = sanitize_arguments({"name": None})

    assert (fields.name, fields.date, fields.time) == ("", "", "")


def test_sanitize_keeps_title_optional() -> None:
    assert sanitize_arguments({}).title is None
    assert sanitize_arguments({"title": None}).title is None
    assert sanitize_arguments({"title": "   "}).title is None
    assert sanitize_arguments({"title": " Kickoff "}).title == "Kickoff"
