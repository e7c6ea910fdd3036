"""Erros de validação de campos de agendamento."""

from __future__ import annotations

from utils.errors import WebhookRequestError


class ValidationError(WebhookRequestError):
    """Campo obrigatório ausente ou fora do formato esperado.

    Attributes:
        field: Campo que falhou primeiro (name, date ou time)
    """

    def __init__(self, field: str, message: str, *, tool_call_id: str | None = None) -> None:
        super().__init__(message, tool_call_id=tool_call_id)
        self.field = field
