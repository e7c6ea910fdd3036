"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.appointment import CalendarEvent

if TYPE_CHECKING:
    from googleapiclient.errors import HttpError

DEFAULT_PROVIDER_ERROR = "Failed to create calendar event"


def map_calendar_event(payload: dict[str, Any]) -> CalendarEvent:
    return CalendarEvent(
        event_id=str(payload.get("id") or ""),
        event_link=str(payload.get("htmlLink") or ""),
        summary=str(payload.get("summary") or ""),
        start=_extract_event_datetime(payload.get("start")),
        end=_extract_event_datetime(payload.get("end")),
    )


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def http_error_message(exc: HttpError) -> str:
    reason = getattr(exc, "reason", None)
    if isinstance(reason, str) and reason.strip():
        return reason.strip()
    return DEFAULT_PROVIDER_ERROR


def _extract_event_datetime(value: Any) -> str:
    if isinstance(value, dict):
        for key in ("dateTime", "date"):
            raw = value.get(key)
            if isinstance(raw, str) and raw.strip():
                return raw
    # Falhamos explicitamente para nao devolver evento sem horario.
    raise ValueError("missing_event_datetime")
