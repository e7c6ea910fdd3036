"""Builders das respostas JSON expostas pela API.

O formato segue o que a plataforma de voz espera: `success` + `error`
legível, e o `tool_call_id` de volta quando conhecido.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.appointment import CalendarEvent, MeetingRequest

SERVICE_MESSAGE = "Voice Scheduling Backend API"
HEALTH_MESSAGE = "Voice Scheduling Backend is running"

AVAILABLE_ENDPOINTS: dict[str, str] = {
    "health": "/health",
    "createEvent": "/webhook/create-event",
}


def build_success_payload(request: MeetingRequest, event: CalendarEvent) -> dict[str, Any]:
    return {
        "success": True,
        "message": f"Calendar event created successfully for {request.name}",
        "event": {
            "id": event.event_id,
            "link": event.event_link,
            "summary": event.summary,
            "start": event.start,
            "end": event.end,
        },
    }


def build_error_payload(
    error: str,
    *,
    tool_call_id: str | None = None,
    echo_tool_call_id: bool = True,
    **extra: Any,
) -> dict[str, Any]:
    """Monta envelope de erro.

    Args:
        error: Mensagem legível
        tool_call_id: Id da tool call de origem (None quando desconhecido)
        echo_tool_call_id: Inclui a chave tool_call_id mesmo quando None
        **extra: Campos adicionais (ex: receivedBody)
    """
    payload: dict[str, Any] = {"success": False, "error": error}
    if echo_tool_call_id:
        payload["tool_call_id"] = tool_call_id
    payload.update(extra)
    return payload


def build_health_payload() -> dict[str, Any]:
    return {
        "status": "ok",
        "message": HEALTH_MESSAGE,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def build_service_info_payload() -> dict[str, Any]:
    return {"message": SERVICE_MESSAGE, "endpoints": dict(AVAILABLE_ENDPOINTS)}


def build_not_found_payload() -> dict[str, Any]:
    return {"error": "Endpoint not found", "availableEndpoints": dict(AVAILABLE_ENDPOINTS)}
