"""Testes do parse inicial do corpo do webhook."""

from __future__ import annotations

import json

import pytest

from api.connectors.vapi.webhook import (
    InvalidJsonBodyError,
    PayloadTooLargeError,
    parse_webhook_request,
)


def test_parse_webhook_request_ok() -> None:
    body = json.dumps({"message": {"toolCalls": []}}).encode("utf-8")

    assert parse_webhook_request(body, max_bytes=1024) == {"message": {"toolCalls": []}}


def test_parse_webhook_request_empty_body_is_empty_object() -> None:
    assert parse_webhook_request(b"  ", max_bytes=1024) == {}


def test_parse_webhook_request_accepts_non_object_json() -> None:
    assert parse_webhook_request(b"[1, 2]", max_bytes=1024) == [1, 2]


def test_parse_webhook_request_invalid_json() -> None:
    with pytest.raises(InvalidJsonBodyError) as exc_info:
        parse_webhook_request(b"{invalid}", max_bytes=1024)

    assert exc_info.value.message == "Invalid JSON body"


def test_parse_webhook_request_rejects_oversized_body() -> None:
    with pytest.raises(PayloadTooLargeError) as exc_info:
        parse_webhook_request(b"x" * 11, max_bytes=10)

    assert exc_info.value.size == 11
    assert exc_info.value.limit == 10


@pytest.mark.parametrize("body", [b'{"foo": NaN}', b'{"foo": Infinity}', b"[-Infinity]"])
def test_parse_webhook_request_rejects_non_standard_constants(body: bytes) -> None:
    with pytest.raises(InvalidJsonBodyError):
        parse_webhook_request(body, max_bytes=1024)


def test_parse_webhook_request_rejects_invalid_utf8() -> None:
    with pytest.raises(InvalidJsonBodyError):
        parse_webhook_request(b'{"name": "\xff"}', max_bytes=1024)
