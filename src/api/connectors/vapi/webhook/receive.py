"""Parse inicial do corpo do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import Any

from utils.errors import WebhookRequestError


class InvalidJsonBodyError(WebhookRequestError):
    """Corpo da requisição não é JSON válido."""

    def __init__(self) -> None:
        super().__init__("Invalid JSON body")


def _reject_constant(name: str) -> Any:
    # NaN/Infinity não são JSON padrão e não podem ser reserializados
    raise ValueError(f"Non-standard JSON constant: {name}")


class PayloadTooLargeError(WebhookRequestError):
    """Corpo da requisição excede o limite configurado."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__("Request body too large")
        self.size = size
        self.limit = limit


def parse_webhook_request(raw_body: bytes, *, max_bytes: int) -> Any:
    """Aplica limite de tamanho e decodifica o JSON do webhook.

    O envelope é opaco neste ponto: qualquer valor JSON é aceito e a
    classificação de formato fica com o normalizer. Corpo vazio vira `{}`.

    Args:
        raw_body: Corpo bruto do request
        max_bytes: Tamanho máximo aceito

    Raises:
        PayloadTooLargeError: Se o corpo exceder max_bytes
        InvalidJsonBodyError: Se o corpo não for JSON válido (inclui NaN e
            Infinity)

    Returns:
        Valor JSON decodificado.
    """
    if len(raw_body) > max_bytes:
        raise PayloadTooLargeError(len(raw_body), max_bytes)

    if not raw_body.strip():
        return {}

    try:
        return json.loads(raw_body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJsonBodyError() from exc
