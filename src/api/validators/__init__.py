"""Validators por canal — validação de parâmetros recebidos.

Estrutura:
- tool_call/: campos de agendamento vindos do assistente de voz
"""

__all__: list[str] = []
