"""Sanitização dos campos extraídos de uma tool call.

Aplicada igualmente a todos os formatos de envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class SanitizedFields:
    """Campos em texto, sem espaços nas bordas.

    Obrigatórios ausentes viram string vazia; `title` ausente continua None.
    """

    name: str
    date: str
    time: str
    title: str | None = None


def sanitize_arguments(arguments: Mapping[str, Any]) -> SanitizedFields:
    """Converte os argumentos decodificados em SanitizedFields."""
    return SanitizedFields(
        name=_as_trimmed_text(arguments.get("name")),
        date=_as_trimmed_text(arguments.get("date")),
        time=_as_trimmed_text(arguments.get("time")),
        title=_optional_text(arguments.get("title")),
    )


def _as_trimmed_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(value: Any) -> str | None:
    # Título em branco equivale a ausente: o builder usa o título padrão.
    text = _as_trimmed_text(value)
    return text or None
