"""Normalizer de tool calls — converte envelopes em MeetingRequest.

Pipeline: classificar formato → decodificar argumentos → sanitizar →
validar. Erros de cada etapa são terminais e carregam o id da tool call
quando conhecido.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from api.validators.tool_call import validate_meeting_fields
from app.domain.appointment import MeetingRequest
from config.logging import summarize_fields

from .extractor import FLAT_FIELD_KEYS, decode_arguments, extract_tool_call
from .sanitizer import sanitize_arguments

logger = logging.getLogger(__name__)

_LOGGED_KEYS = (*FLAT_FIELD_KEYS, "title")


@dataclass(frozen=True, slots=True)
class NormalizedEnvelope:
    """Pedido canônico junto com metadados do envelope de origem."""

    request: MeetingRequest
    shape: str
    tool_call_id: str | None = None


def normalize_envelope(body: Any) -> NormalizedEnvelope:
    """Normaliza qualquer envelope suportado.

    Raises:
        UnknownEnvelopeError: Formato desconhecido
        ArgumentParseError: Argumentos em texto com JSON inválido
        ValidationError: name/date/time ausente ou malformado
    """
    extracted = extract_tool_call(body)
    arguments = decode_arguments(extracted.arguments, tool_call_id=extracted.tool_call_id)

    logger.info(
        "envelope_shape_detected",
        extra={
            "shape": extracted.shape,
            "tool_call_id": extracted.tool_call_id,
            "fields": summarize_fields(arguments, _LOGGED_KEYS),
        },
    )

    fields = sanitize_arguments(arguments)
    validate_meeting_fields(fields, tool_call_id=extracted.tool_call_id)

    return NormalizedEnvelope(
        request=MeetingRequest(
            name=fields.name,
            date=fields.date,
            time=fields.time,
            title=fields.title,
        ),
        shape=extracted.shape,
        tool_call_id=extracted.tool_call_id,
    )
