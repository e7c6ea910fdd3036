"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto.
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.event_builder import (
    DEFAULT_REMINDERS,
    EventWindow,
    build_event_body,
    compute_event_window,
    event_summary,
)

__all__ = [
    "DEFAULT_REMINDERS",
    "EventWindow",
    "build_event_body",
    "compute_event_window",
    "event_summary",
]
