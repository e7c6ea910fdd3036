"""Agregador de settings base.

Re-exporta as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_PORT",
    "BaseSettings",
    "Environment",
    "get_base_settings",
]
