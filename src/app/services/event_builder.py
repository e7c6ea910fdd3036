"""Montagem do evento de calendario a partir de um MeetingRequest.

Regras:
- Inicio = date + time no timezone configurado
- Fim = inicio + 1 hora, com virada de dia/mes/ano (23:30 -> 00:30 do dia seguinte)
- Titulo = title ou "Meeting with <name>"
- Lembretes: email 24h antes e popup 30 min antes

Os horarios saem como datetime local sem offset (YYYY-MM-DDTHH:MM:SS);
o provider aplica o timeZone informado ao lado de cada horario.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from utils.errors import InvalidEventTimeError

if TYPE_CHECKING:
    from app.domain.appointment import MeetingRequest

EVENT_DURATION = timedelta(hours=1)

DEFAULT_REMINDERS: tuple[dict[str, Any], ...] = (
    {"method": "email", "minutes": 24 * 60},
    {"method": "popup", "minutes": 30},
)


@dataclass(frozen=True, slots=True)
class EventWindow:
    """Janela do evento em horario local do timezone informado."""

    start: str
    end: str
    time_zone: str


def compute_event_window(date: str, time: str, *, time_zone: str) -> EventWindow:
    """Calcula inicio e fim do evento.

    Raises:
        InvalidEventTimeError: Se date/time nao existirem no calendario
            (ex: 2025-02-30, 25:00).
    """
    try:
        start = datetime.strptime(f"{date}T{time}", "%Y-%m-%dT%H:%M")
        end = start + EVENT_DURATION
    except (ValueError, OverflowError) as exc:
        raise InvalidEventTimeError(f"Invalid date/time value: {date} {time}") from exc

    return EventWindow(
        start=start.isoformat(timespec="seconds"),
        end=end.isoformat(timespec="seconds"),
        time_zone=time_zone,
    )


def event_summary(request: MeetingRequest) -> str:
    return request.title or f"Meeting with {request.name}"


def build_event_body(request: MeetingRequest, window: EventWindow) -> dict[str, Any]:
    """Monta o corpo de events.insert da Google Calendar API v3."""
    return {
        "summary": event_summary(request),
        "description": f"Scheduled meeting with {request.name}",
        "start": {"dateTime": window.start, "timeZone": window.time_zone},
        "end": {"dateTime": window.end, "timeZone": window.time_zone},
        "attendees": [],
        "reminders": {
            "useDefault": False,
            "overrides": [dict(reminder) for reminder in DEFAULT_REMINDERS],
        },
    }
