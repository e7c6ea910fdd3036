"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- tool_call/: envelopes de tool call do assistente de voz

Cada fonte tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .tool_call import normalize_envelope

__all__ = ["normalize_envelope"]
