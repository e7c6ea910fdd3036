"""Endpoint de webhook para criação de eventos via tool call.

Endpoints:
- POST /webhook/create-event: recebe a tool call do assistente de voz

Fluxo:
1. Limite de tamanho + decode do JSON bruto
2. Normalização do envelope (formato, argumentos, sanitização, validação)
3. Criação do evento no provider de calendário
4. Resposta no formato esperado pelo protocolo de tool call

Status:
- 200: evento criado, ou falha do provider (success=false); a plataforma
  de voz precisa de resposta bem-formada mesmo quando o calendário falha
- 400: corpo inválido, formato desconhecido, argumentos ou campos inválidos
- 413: corpo acima do limite
- 500: falha inesperada
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.vapi.webhook import (
    InvalidJsonBodyError,
    PayloadTooLargeError,
    parse_webhook_request,
)
from api.normalizers.tool_call import UnknownEnvelopeError, normalize_envelope
from api.payload_builders.webhook import build_error_payload, build_success_payload
from app.bootstrap import get_create_event_use_case
from app.observability import get_correlation_id
from config.settings import get_base_settings
from utils.errors import WebhookRequestError

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_ERROR_MESSAGE = "Failed to create calendar event"


@router.post("/create-event")
async def create_event(request: Request) -> JSONResponse:
    """Cria evento de calendário a partir de uma tool call.

    Returns:
        JSONResponse com envelope de sucesso ou erro.
    """
    try:
        return await _handle_create_event(request)
    except Exception:
        logger.exception(
            "webhook_processing_failed",
            extra={"correlation_id": get_correlation_id()},
        )
        return _json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            build_error_payload(INTERNAL_ERROR_MESSAGE, echo_tool_call_id=False),
        )


async def _handle_create_event(request: Request) -> JSONResponse:
    raw_body = await request.body()
    settings = get_base_settings()

    try:
        body = parse_webhook_request(raw_body, max_bytes=settings.max_body_bytes)
    except PayloadTooLargeError as exc:
        logger.warning(
            "webhook_payload_too_large",
            extra={"payload_size": exc.size, "limit": exc.limit},
        )
        return _json(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            build_error_payload(exc.message, echo_tool_call_id=False),
        )
    except InvalidJsonBodyError as exc:
        logger.warning("webhook_invalid_json", extra={"payload_size": len(raw_body)})
        return _json(
            status.HTTP_400_BAD_REQUEST,
            build_error_payload(exc.message, echo_tool_call_id=False),
        )

    logger.info(
        "webhook_received",
        extra={
            "payload_size": len(raw_body),
            "body_keys": sorted(body) if isinstance(body, dict) else None,
        },
    )

    try:
        normalized = normalize_envelope(body)
    except UnknownEnvelopeError as exc:
        logger.warning("webhook_unknown_format", extra={"body_type": type(body).__name__})
        return _json(
            status.HTTP_400_BAD_REQUEST,
            build_error_payload(exc.message, tool_call_id=None, receivedBody=body),
        )
    except WebhookRequestError as exc:
        logger.warning(
            "webhook_request_rejected",
            extra={
                "error_type": type(exc).__name__,
                "field": getattr(exc, "field", None),
                "tool_call_id": exc.tool_call_id,
            },
        )
        return _json(
            status.HTTP_400_BAD_REQUEST,
            build_error_payload(exc.message, tool_call_id=exc.tool_call_id),
        )

    use_case = get_create_event_use_case()
    result = await use_case.execute(normalized.request, tool_call_id=normalized.tool_call_id)

    if not result.success or result.event is None:
        return _json(
            status.HTTP_200_OK,
            build_error_payload(
                result.error or INTERNAL_ERROR_MESSAGE,
                tool_call_id=normalized.tool_call_id,
            ),
        )

    return _json(status.HTTP_200_OK, build_success_payload(normalized.request, result.event))


def _json(status_code: int, content: dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code)
