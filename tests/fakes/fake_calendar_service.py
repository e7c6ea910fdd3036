"""Fake in-memory de calendario para testes deterministas."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from app.domain.appointment import CalendarEvent, MeetingRequest
from app.services.event_builder import build_event_body, compute_event_window


class FakeCalendarService:
    """Implementa o protocolo sem IO.

    Usa o mesmo builder do client real, entao start/end refletem a janela
    calculada. `error` faz toda chamada falhar com a excecao informada.
    """

    def __init__(self, *, time_zone: str = "Asia/Kolkata", error: Exception | None = None) -> None:
        self._time_zone = time_zone
        self._error = error
        self.requests: list[MeetingRequest] = []
        self.bodies: list[dict[str, Any]] = []

    async def create_event(self, request: MeetingRequest) -> CalendarEvent:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        window = compute_event_window(request.date, request.time, time_zone=self._time_zone)
        body = build_event_body(request, window)
        self.bodies.append(body)
        event_id = uuid4().hex[:12]
        return CalendarEvent(
            event_id=event_id,
            event_link=f"https://calendar.google.com/fake/{event_id}",
            summary=body["summary"],
            start=window.start,
            end=window.end,
        )
