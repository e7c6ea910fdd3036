"""Client concreto de Google Calendar para criacao de eventos."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from google.auth.exceptions import GoogleAuthError, RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import (
    http_error_message,
    http_status,
    map_calendar_event,
)
from app.observability import get_correlation_id
from app.protocols.calendar_service import CalendarServiceProtocol
from app.services.event_builder import build_event_body, compute_event_window
from utils.errors import (
    CalendarAuthError,
    CalendarServiceError,
    CalendarTimeoutError,
)

if TYPE_CHECKING:
    from app.domain.appointment import CalendarEvent, MeetingRequest
    from config.settings import CalendarSettings

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
_CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"
_TOKEN_URI = "https://oauth2.googleapis.com/token"
_AUTH_STATUS_CODES = frozenset({401, 403})


class GoogleCalendarClient(CalendarServiceProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google.

    Autentica com refresh token OAuth2; o access token e renovado pela
    propria google-auth a cada expiracao.
    """

    __slots__ = ("_calendar_id", "_service", "_timeout_seconds", "_timezone")

    def __init__(
        self,
        *,
        calendar_id: str,
        client_id: str,
        client_secret: str,
        refresh_token: str,
        timezone: str,
        timeout_seconds: float | None = None,
    ) -> None:
        # Falha no boot se o timezone nao existir.
        ZoneInfo(timezone)
        credentials = Credentials(
            token=None,
            refresh_token=refresh_token,
            client_id=client_id,
            client_secret=client_secret,
            token_uri=_TOKEN_URI,
            scopes=[_CALENDAR_SCOPE],
        )
        self._calendar_id = calendar_id
        self._timezone = timezone
        self._timeout_seconds = timeout_seconds
        self._service = build("calendar", "v3", credentials=credentials, cache_discovery=False)

    @classmethod
    def from_settings(cls, settings: CalendarSettings) -> GoogleCalendarClient:
        return cls(
            calendar_id=settings.google_calendar_id,
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret,
            refresh_token=settings.google_refresh_token,
            timezone=settings.calendar_timezone,
            timeout_seconds=settings.call_timeout_seconds,
        )

    async def create_event(self, request: MeetingRequest) -> CalendarEvent:
        window = compute_event_window(request.date, request.time, time_zone=self._timezone)
        body = build_event_body(request, window)
        logger.info(
            "google_calendar_insert_started",
            extra={
                "component": _COMPONENT,
                "action": "create_event",
                "start": window.start,
                "end": window.end,
                "correlation_id": get_correlation_id(),
            },
        )
        try:
            response = await self._run_insert(body)
            event = map_calendar_event(response)
        except TimeoutError as exc:
            logger.warning(
                "google_calendar_insert_timed_out",
                extra={
                    "component": _COMPONENT,
                    "action": "create_event",
                    "result": "timeout",
                    "timeout_seconds": self._timeout_seconds,
                    "may_have_created": True,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise CalendarTimeoutError("Calendar request timed out") from exc
        except RefreshError as exc:
            self._log_error(action="create_event", result="auth_error")
            raise CalendarAuthError("Calendar authentication failed") from exc
        except HttpError as exc:
            self._log_error(action="create_event", result="error", exc=exc)
            error_cls = (
                CalendarAuthError if http_status(exc) in _AUTH_STATUS_CODES else CalendarServiceError
            )
            raise error_cls(http_error_message(exc)) from exc
        except (GoogleAuthError, OSError, ValueError) as exc:
            self._log_error(action="create_event", result="error")
            raise CalendarServiceError(str(exc) or "Failed to create calendar event") from exc

        logger.info(
            "google_calendar_insert_succeeded",
            extra={
                "component": _COMPONENT,
                "action": "create_event",
                "result": "ok",
                "event_id": event.event_id,
                "correlation_id": get_correlation_id(),
            },
        )
        return event

    async def _run_insert(self, body: dict[str, Any]) -> dict[str, Any]:
        call = asyncio.to_thread(self._insert_event_sync, body)
        if self._timeout_seconds is None:
            return await call
        # O timeout só encerra a espera: a thread do insert segue e o evento
        # ainda pode ser criado depois do CalendarTimeoutError.
        return await asyncio.wait_for(call, timeout=self._timeout_seconds)

    def _insert_event_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().insert(calendarId=self._calendar_id, body=body).execute()

    def _log_error(self, *, action: str, result: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)
