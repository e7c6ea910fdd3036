"""Normalizer de tool calls do assistente de voz.

Reconhece os formatos de envelope suportados e produz um MeetingRequest.
"""

from .errors import ArgumentParseError, UnknownEnvelopeError
from .extractor import (
    ENVELOPE_SHAPES,
    FLAT_SHAPE,
    EncodedArguments,
    EnvelopeShape,
    ExtractedToolCall,
    StructuredArguments,
    ToolCallArguments,
    decode_arguments,
    extract_tool_call,
)
from .normalizer import NormalizedEnvelope, normalize_envelope
from .sanitizer import SanitizedFields, sanitize_arguments

__all__ = [
    "ENVELOPE_SHAPES",
    "FLAT_SHAPE",
    "ArgumentParseError",
    "EncodedArguments",
    "EnvelopeShape",
    "ExtractedToolCall",
    "NormalizedEnvelope",
    "SanitizedFields",
    "StructuredArguments",
    "ToolCallArguments",
    "UnknownEnvelopeError",
    "decode_arguments",
    "extract_tool_call",
    "normalize_envelope",
    "sanitize_arguments",
]
