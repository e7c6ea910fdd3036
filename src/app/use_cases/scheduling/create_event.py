"""Use case de criacao de evento a partir de um pedido normalizado."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from utils.errors import CalendarServiceError

if TYPE_CHECKING:
    from app.domain.appointment import CalendarEvent, MeetingRequest
    from app.protocols.calendar_service import CalendarServiceProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateEventResult:
    """Resultado do use case.

    Falha do provider nao e excecao: vira success=False com a mensagem
    do provider, para a borda responder dentro do protocolo de tool call.
    """

    success: bool
    event: CalendarEvent | None = None
    error: str | None = None
    error_type: str | None = None


class CreateCalendarEventUseCase:
    """Delegar a criacao do evento ao provider e mapear falhas dele."""

    def __init__(self, calendar_service: CalendarServiceProtocol) -> None:
        self._calendar_service = calendar_service

    async def execute(
        self,
        request: MeetingRequest,
        *,
        tool_call_id: str | None = None,
    ) -> CreateEventResult:
        """Cria o evento; uma tentativa, sem retry.

        Erros fora de CalendarServiceError propagam (falha interna).
        """
        try:
            event = await self._calendar_service.create_event(request)
        except CalendarServiceError as exc:
            logger.warning(
                "calendar_event_creation_failed",
                extra={
                    "tool_call_id": tool_call_id,
                    "error_type": type(exc).__name__,
                },
            )
            return CreateEventResult(
                success=False,
                error=str(exc) or "Failed to create calendar event",
                error_type=type(exc).__name__,
            )

        logger.info(
            "calendar_event_created",
            extra={"tool_call_id": tool_call_id, "event_id": event.event_id},
        )
        return CreateEventResult(success=True, event=event)
