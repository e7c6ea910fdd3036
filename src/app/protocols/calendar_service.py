"""Contrato de calendario usado pelo caso de uso de criacao de evento.

Mantemos apenas o protocolo aqui para permitir troca de provider (ou um
fake em testes) sem impactar a borda HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.appointment import CalendarEvent, MeetingRequest


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Contrato para criacao de eventos de calendario."""

    async def create_event(self, request: MeetingRequest) -> CalendarEvent:
        """Cria um evento de 1 hora e retorna os dados confirmados.

        Raises:
            CalendarServiceError: Em qualquer falha do provider.
        """
        ...
