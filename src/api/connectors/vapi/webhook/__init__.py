"""Recebimento de webhooks de tool call."""

from .receive import (
    InvalidJsonBodyError,
    PayloadTooLargeError,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonBodyError",
    "PayloadTooLargeError",
    "parse_webhook_request",
]
