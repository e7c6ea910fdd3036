"""Settings de integracao com Google Calendar.

Centralizar a leitura de env aqui mantem o normalizer e o builder
testaveis sem variaveis de ambiente: o client recebe estas settings
ja resolvidas no bootstrap.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class CalendarSettings(BaseModel):
    """Configuracoes do calendario alvo e das credenciais OAuth2."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    google_client_id: str = Field(default="", description="Client ID do app OAuth2.")
    google_client_secret: str = Field(default="", description="Client secret do app OAuth2.")
    google_refresh_token: str = Field(
        default="",
        description="Refresh token usado para obter access tokens sem interacao.",
    )
    google_calendar_id: str = Field(
        default="primary",
        description="ID do calendario onde os eventos sao criados.",
    )
    calendar_timezone: str = Field(
        default="Asia/Kolkata",
        description="Timezone aplicado ao inicio e fim do evento.",
    )
    calendar_call_timeout_ms: int | None = Field(
        default=None,
        ge=1,
        description="Timeout da chamada ao provider; None desativa.",
    )

    @property
    def call_timeout_seconds(self) -> float | None:
        if self.calendar_call_timeout_ms is None:
            return None
        return self.calendar_call_timeout_ms / 1000

    def validate_credentials(self) -> list[str]:
        """Lista credenciais ausentes (vazia = OK)."""
        errors: list[str] = []
        if not self.google_client_id:
            errors.append("GOOGLE_CLIENT_ID nao configurado")
        if not self.google_client_secret:
            errors.append("GOOGLE_CLIENT_SECRET nao configurado")
        if not self.google_refresh_token:
            errors.append("GOOGLE_REFRESH_TOKEN nao configurado")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    timeout_raw = _read_optional_env("CALENDAR_CALL_TIMEOUT_MS")
    return CalendarSettings(
        google_client_id=os.getenv("GOOGLE_CLIENT_ID", "").strip(),
        google_client_secret=os.getenv("GOOGLE_CLIENT_SECRET", "").strip(),
        google_refresh_token=os.getenv("GOOGLE_REFRESH_TOKEN", "").strip(),
        google_calendar_id=_read_optional_env("GOOGLE_CALENDAR_ID") or "primary",
        calendar_timezone=_read_optional_env("CALENDAR_TIMEZONE") or "Asia/Kolkata",
        calendar_call_timeout_ms=int(timeout_raw) if timeout_raw else None,
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
