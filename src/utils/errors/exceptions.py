"""Exceções compartilhadas entre a borda HTTP e a integração de calendário."""

from __future__ import annotations


class WebhookRequestError(ValueError):
    """Base para falhas de webhook que o chamador consegue corrigir.

    Carrega o id da tool call de origem (quando conhecido) para que a
    resposta de erro permita correlação do lado do assistente de voz.
    """

    def __init__(self, message: str, *, tool_call_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.tool_call_id = tool_call_id


class InfrastructureError(RuntimeError):
    """Base para falhas de dependências externas."""


class CalendarServiceError(InfrastructureError):
    """Falha ao criar evento no provider de calendário."""


class CalendarAuthError(CalendarServiceError):
    """Credenciais OAuth2 ausentes, revogadas ou impossíveis de renovar."""


class CalendarTimeoutError(CalendarServiceError):
    """Chamada ao provider excedeu o timeout configurado."""


class InvalidEventTimeError(CalendarServiceError):
    """Data/hora passou no formato mas não existe no calendário (ex: 25:00)."""
