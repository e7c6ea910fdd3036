"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de domínio (pedido de agendamento, evento)
- use_cases/: casos de uso (sem IO direto)
- services/: regras reutilizáveis (janela e corpo do evento)
- infra/: implementações concretas de IO (Google Calendar)
- protocols/: contratos/interfaces
- observability/: correlation_id por requisição

Padrão: app executa; api adapta; utils apoia.
"""
