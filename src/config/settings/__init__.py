"""Agregador de settings do voice-scheduler.

Re-exporta as settings de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Calendar settings
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)

__all__ = [
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_PORT",
    # Base
    "BaseSettings",
    # Calendar
    "CalendarSettings",
    "Environment",
    "get_base_settings",
    "get_calendar_settings",
]
