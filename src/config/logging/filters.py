"""Filter que carimba cada record com o contexto da requisição de webhook.

Quem loga no normalizer, no use case ou no client do Google só passa o
nome do evento e metadados; `service` e `correlation_id` entram aqui.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _no_correlation_id() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Preenche `service` e `correlation_id` sem descartar records.

    O correlation_id vem do header `x-correlation-id` da chamada do
    assistente de voz (via getter); fora de uma requisição fica vazio.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter or _no_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        # `extra={"correlation_id": ...}` explícito tem prioridade
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._correlation_id_getter()
        record.service = self._service_name
        return True
