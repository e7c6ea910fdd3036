"""Extrator de envelopes de tool call do assistente de voz.

O mesmo pedido chega em formatos diferentes conforme a versão/config da
plataforma. Cada formato conhecido é uma entrada da tabela ENVELOPE_SHAPES,
avaliada em ordem de prioridade; o primeiro que casar vence. Incluir ou
remover um formato é só editar a tabela.

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ArgumentParseError, UnknownEnvelopeError

logger = logging.getLogger(__name__)

FLAT_SHAPE = "flat"
FLAT_FIELD_KEYS = ("name", "date", "time")
_FLAT_TOOL_CALL_ID_KEYS = ("toolCallId", "tool_call_id")
_ESCAPED_QUOTE = '\\"'


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


@dataclass(frozen=True, slots=True)
class StructuredArguments:
    """Argumentos já entregues como objeto JSON."""

    values: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class EncodedArguments:
    """Argumentos entregues como texto JSON (às vezes com aspas escapadas)."""

    text: str


ToolCallArguments = StructuredArguments | EncodedArguments


@dataclass(frozen=True, slots=True)
class ExtractedToolCall:
    """Resultado da classificação: formato casado, id e argumentos brutos."""

    shape: str
    tool_call_id: str | None
    arguments: ToolCallArguments


@dataclass(frozen=True, slots=True)
class EnvelopeShape:
    """Formato de envelope com tool calls aninhadas.

    Attributes:
        name: Nome estável do formato (usado em logs)
        path: Chaves até o objeto que contém a lista de tool calls
        list_keys: Sinônimos da lista, tentados em ordem
    """

    name: str
    path: tuple[str, ...]
    list_keys: tuple[str, ...]

    def locate(self, body: Mapping[str, Any]) -> Mapping[str, Any] | None:
        """Retorna a primeira tool call do formato, ou None se não casar."""
        container: Any = body
        for key in self.path:
            container = container.get(key) if isinstance(container, Mapping) else None
        if not isinstance(container, Mapping):
            return None
        for list_key in self.list_keys:
            entry = _first_entry(container.get(list_key))
            if entry is not None:
                return entry
        return None


ENVELOPE_SHAPES: tuple[EnvelopeShape, ...] = (
    EnvelopeShape("assistant.toolCalls", ("assistant",), ("toolCalls", "tool_calls")),
    EnvelopeShape("message.toolCalls", ("message",), ("toolCalls",)),
    EnvelopeShape("message.toolCallList", ("message",), ("toolCallList",)),
    EnvelopeShape("message.tool_calls", ("message",), ("tool_calls",)),
    EnvelopeShape("toolCalls", (), ("toolCalls", "tool_calls")),
)


def extract_tool_call(body: Any) -> ExtractedToolCall:
    """Classifica o envelope e extrai a tool call relevante.

    Ordem: ENVELOPE_SHAPES e, por último, o formato plano (campos na raiz,
    útil para curl/testes).

    Raises:
        UnknownEnvelopeError: Se nenhum formato casar.
    """
    if not isinstance(body, Mapping):
        raise UnknownEnvelopeError()

    for shape in ENVELOPE_SHAPES:
        entry = shape.locate(body)
        if entry is not None:
            return _from_tool_call_entry(shape.name, entry)

    if _is_flat_shape(body):
        return ExtractedToolCall(
            shape=FLAT_SHAPE,
            tool_call_id=_first_identifier(body, _FLAT_TOOL_CALL_ID_KEYS),
            arguments=StructuredArguments(body),
        )

    raise UnknownEnvelopeError()


def decode_arguments(
    arguments: ToolCallArguments,
    *,
    tool_call_id: str | None = None,
) -> Mapping[str, Any]:
    """Converte os argumentos da tool call em mapping.

    Texto: strip, troca `\\"` por `"` e json.loads. Objeto: usado direto.

    Raises:
        ArgumentParseError: Se o texto não for JSON de objeto.
    """
    if isinstance(arguments, StructuredArguments):
        return arguments.values

    cleaned = arguments.text.strip().replace(_ESCAPED_QUOTE, '"')
    try:
        decoded = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.warning(
            "tool_call_arguments_invalid_json",
            extra={"tool_call_id": tool_call_id, "error_position": getattr(exc, "pos", None)},
        )
        raise ArgumentParseError(tool_call_id=tool_call_id) from exc

    if not isinstance(decoded, Mapping):
        logger.warning(
            "tool_call_arguments_not_object",
            extra={"tool_call_id": tool_call_id, "decoded_type": type(decoded).__name__},
        )
        raise ArgumentParseError(tool_call_id=tool_call_id)
    return decoded


def _from_tool_call_entry(shape: str, entry: Mapping[str, Any]) -> ExtractedToolCall:
    tool_call_id = _first_identifier(entry, ("id",))
    function = entry.get("function")
    raw_arguments = function.get("arguments") if isinstance(function, Mapping) else None
    return ExtractedToolCall(
        shape=shape,
        tool_call_id=tool_call_id,
        arguments=_wrap_arguments(raw_arguments, tool_call_id),
    )


def _wrap_arguments(raw: Any, tool_call_id: str | None) -> ToolCallArguments:
    if isinstance(raw, str):
        return EncodedArguments(raw)
    if isinstance(raw, Mapping):
        return StructuredArguments(raw)
    if raw is None:
        # Campos ausentes viram erro de validação, não de parse.
        return StructuredArguments({})
    raise ArgumentParseError(tool_call_id=tool_call_id)


def _first_entry(candidate: Any) -> Mapping[str, Any] | None:
    if not isinstance(candidate, list) or not candidate:
        return None
    entry = candidate[0]
    return entry if isinstance(entry, Mapping) and entry else None


def _is_flat_shape(body: Mapping[str, Any]) -> bool:
    return any(body.get(key) not in (None, "") for key in FLAT_FIELD_KEYS)


def _first_identifier(
    source: Mapping[str, Any],
    keys: tuple[str, ...],
) -> str | None:
    for key in keys:
        value = source.get(key)
        if isinstance(value, (str, int)) and not isinstance(value, bool) and value != "":
            return str(value)
    return None
