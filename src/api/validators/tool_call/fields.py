"""Validadores para os campos de agendamento.

Regras em ordem fixa; a primeira falha interrompe as demais.
Só o formato é verificado aqui: valores como 25:00 ou 2025-13-40
passam e são recusados pelo builder do evento.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from api.validators.tool_call.errors import ValidationError

if TYPE_CHECKING:
    from api.normalizers.tool_call.sanitizer import SanitizedFields

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)

INVALID_DATE_MESSAGE = "Invalid date format. Expected YYYY-MM-DD"
INVALID_TIME_MESSAGE = "Invalid time format. Expected HH:MM (24-hour)"


def missing_field_message(field: str) -> str:
    return f"Missing required field: {field}"


def validate_meeting_fields(
    fields: SanitizedFields,
    *,
    tool_call_id: str | None = None,
) -> None:
    """Valida name, date e time já sanitizados.

    Args:
        fields: Campos sanitizados
        tool_call_id: Id da tool call, anexado ao erro para correlação

    Raises:
        ValidationError: No primeiro campo ausente ou malformado
    """
    if not fields.name:
        raise ValidationError("name", missing_field_message("name"), tool_call_id=tool_call_id)

    _check_pattern("date", fields.date, DATE_PATTERN, INVALID_DATE_MESSAGE, tool_call_id)
    _check_pattern("time", fields.time, TIME_PATTERN, INVALID_TIME_MESSAGE, tool_call_id)


def is_valid_date(value: str) -> bool:
    return DATE_PATTERN.fullmatch(value) is not None


def is_valid_time(value: str) -> bool:
    return TIME_PATTERN.fullmatch(value) is not None


def _check_pattern(
    field: str,
    value: str,
    pattern: re.Pattern[str],
    invalid_message: str,
    tool_call_id: str | None,
) -> None:
    if not value:
        raise ValidationError(field, missing_field_message(field), tool_call_id=tool_call_id)
    if pattern.fullmatch(value) is None:
        raise ValidationError(field, invalid_message, tool_call_id=tool_call_id)
