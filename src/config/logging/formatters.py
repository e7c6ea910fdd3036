"""Formatter JSON dos logs do voice-scheduler.

Uma linha por evento, por exemplo:

    {"asctime": "2025-03-10T09:30:00+0000", "level": "INFO",
     "logger": "api.normalizers.tool_call.normalizer",
     "message": "envelope_shape_detected", "correlation_id": "c0ffee",
     "service": "voice_scheduler", "shape": "message.toolCalls",
     "fields": {"name": "str", "date": "str", "time": "str", "title": "absent"}}

`message` é sempre um nome de evento em snake_case; o contexto vai em
campos extras e nunca inclui valores vindos do payload.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

# ISO-8601, mesmo formato do timestamp do /health
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter com os campos fixos e nomes curtos (level, logger)."""
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        datefmt=LOG_DATE_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
    )
