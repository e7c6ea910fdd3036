"""Testes do wiring de dependências do bootstrap."""

from __future__ import annotations

import pytest

from app import bootstrap
from app.bootstrap.dependencies import create_calendar_service, create_event_use_case
from app.infra.calendar import google_calendar_client as client_module
from app.infra.calendar.google_calendar_client import GoogleCalendarClient
from app.use_cases.scheduling import CreateCalendarEventUseCase
from config.settings import CalendarSettings


@pytest.fixture(autouse=True)
def _offline_discovery(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(client_module, "build", lambda *args, **kwargs: object())


def test_create_calendar_service_from_explicit_settings() -> None:
    settings = CalendarSettings(
        google_client_id="id",
        google_client_secret="secret",
        google_refresh_token="token",
        calendar_timezone="UTC",
    )

    service = create_calendar_service(settings)

    assert isinstance(service, GoogleCalendarClient)


def test_create_calendar_service_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_CALENDAR_ID", "ops@example.com")

    service = create_calendar_service()

    assert service._calendar_id == "ops@example.com"


def test_create_event_use_case_wraps_service() -> None:
    service = create_calendar_service(CalendarSettings())

    assert isinstance(create_event_use_case(service), CreateCalendarEventUseCase)


def test_bootstrap_getters_are_singletons() -> None:
    bootstrap.get_calendar_service.cache_clear()
    bootstrap.get_create_event_use_case.cache_clear()
    try:
        assert bootstrap.get_create_event_use_case() is bootstrap.get_create_event_use_case()
        assert bootstrap.get_calendar_service() is bootstrap.get_calendar_service()
    finally:
        bootstrap.get_calendar_service.cache_clear()
        bootstrap.get_create_event_use_case.cache_clear()
