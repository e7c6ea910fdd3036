"""Factories — criação de implementações concretas a partir das settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.use_cases.scheduling import CreateCalendarEventUseCase
from config.settings import get_calendar_settings

if TYPE_CHECKING:
    from app.protocols.calendar_service import CalendarServiceProtocol
    from config.settings import CalendarSettings

logger = logging.getLogger(__name__)


def create_calendar_service(
    settings: CalendarSettings | None = None,
) -> CalendarServiceProtocol:
    """Cria o client Google Calendar a partir das settings.

    Args:
        settings: Settings explícitas (testes); None lê da env.
    """
    from app.infra.calendar.google_calendar_client import GoogleCalendarClient

    resolved = settings or get_calendar_settings()
    logger.info(
        "calendar_service_created",
        extra={
            "component": "bootstrap",
            "provider": "google",
            "calendar_id": resolved.google_calendar_id,
            "timezone": resolved.calendar_timezone,
            "timeout_ms": resolved.calendar_call_timeout_ms,
        },
    )
    return GoogleCalendarClient.from_settings(resolved)


def create_event_use_case(
    calendar_service: CalendarServiceProtocol,
) -> CreateCalendarEventUseCase:
    """Cria o use case de criação de evento com o provider informado."""
    return CreateCalendarEventUseCase(calendar_service)
