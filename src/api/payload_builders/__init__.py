"""Payload builders — construção das respostas devolvidas ao assistente.

Estrutura:
- webhook/: envelopes de sucesso/erro do webhook de criação de evento
"""

__all__: list[str] = []
