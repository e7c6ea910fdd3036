"""Erros de classificação e decodificação de envelopes de tool call."""

from __future__ import annotations

from utils.errors import WebhookRequestError

UNKNOWN_FORMAT_MESSAGE = "Unknown request format. Could not extract parameters."
INVALID_ARGUMENTS_MESSAGE = "Invalid JSON in tool call arguments"


class UnknownEnvelopeError(WebhookRequestError):
    """Nenhum formato conhecido de envelope casou com o corpo recebido."""

    def __init__(self) -> None:
        super().__init__(UNKNOWN_FORMAT_MESSAGE)


class ArgumentParseError(WebhookRequestError):
    """`function.arguments` da tool call não decodifica para um objeto JSON."""

    def __init__(self, *, tool_call_id: str | None = None) -> None:
        super().__init__(INVALID_ARGUMENTS_MESSAGE, tool_call_id=tool_call_id)
