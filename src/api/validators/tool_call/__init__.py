"""Validadores dos parâmetros de agendamento vindos de tool calls."""

from .errors import ValidationError
from .fields import (
    DATE_PATTERN,
    TIME_PATTERN,
    is_valid_date,
    is_valid_time,
    validate_meeting_fields,
)

__all__ = [
    "DATE_PATTERN",
    "TIME_PATTERN",
    "ValidationError",
    "is_valid_date",
    "is_valid_time",
    "validate_meeting_fields",
]
