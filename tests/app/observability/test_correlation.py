"""Testes do contexto de correlation_id."""

from __future__ import annotations

import uuid

from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("req-1")
    assert get_correlation_id() == "req-1"

    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_missing_value_generates_uuid() -> None:
    token = set_correlation_id(None)
    try:
        uuid.UUID(get_correlation_id())
    finally:
        reset_correlation_id(token)
