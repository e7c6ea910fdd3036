"""Configuração do pytest para o projeto voice-scheduler."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_base_settings, get_calendar_settings  # noqa: E402

_SETTINGS_ENV_KEYS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "LOG_LEVEL",
    "PORT",
    "CORS_ALLOW_ORIGINS",
    "MAX_BODY_BYTES",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "GOOGLE_REFRESH_TOKEN",
    "GOOGLE_CALENDAR_ID",
    "CALENDAR_TIMEZONE",
    "CALENDAR_CALL_TIMEOUT_MS",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Cada teste lê settings de um ambiente limpo."""
    for key in _SETTINGS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_base_settings.cache_clear()
    get_calendar_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_calendar_settings.cache_clear()
