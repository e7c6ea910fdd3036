"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CalendarAuthError,
    CalendarServiceError,
    CalendarTimeoutError,
    InfrastructureError,
    InvalidEventTimeError,
    WebhookRequestError,
)

__all__ = [
    "CalendarAuthError",
    "CalendarServiceError",
    "CalendarTimeoutError",
    "InfrastructureError",
    "InvalidEventTimeError",
    "WebhookRequestError",
]
