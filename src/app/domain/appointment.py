"""Modelos de dominio para criacao de eventos de calendario.

Esses contratos ficam no dominio para compartilhar dados entre a borda
HTTP e o provider de calendario sem acoplar um ao outro.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MeetingRequest(BaseModel):
    """Parametros canonicos de agendamento ja sanitizados e validados."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., min_length=1, description="Nome de quem pediu o agendamento.")
    date: str = Field(..., description="Data do encontro (YYYY-MM-DD).")
    time: str = Field(..., description="Horario de inicio (HH:MM, 24h).")
    title: str | None = Field(
        default=None,
        description="Titulo opcional; ausente gera 'Meeting with <name>'.",
    )


class CalendarEvent(BaseModel):
    """Evento confirmado no provider de calendario."""

    model_config = ConfigDict(extra="ignore")

    event_id: str = Field(..., description="Identificador do evento no provider.")
    event_link: str = Field(default="", description="URL para visualizar o evento.")
    summary: str = Field(default="", description="Titulo gravado no evento.")
    start: str = Field(..., description="Inicio como devolvido pelo provider.")
    end: str = Field(..., description="Fim como devolvido pelo provider.")


__all__ = ["CalendarEvent", "MeetingRequest"]
