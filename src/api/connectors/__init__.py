"""Connectors — adapters de borda para plataformas externas.

Estrutura:
- vapi/: webhook de tool calls do assistente de voz
"""

__all__: list[str] = []
