"""API — camada de borda do webhook.

Responsabilidades:
- Receber requests do assistente de voz
- Decodificar e normalizar envelopes de tool call
- Validar parâmetros de agendamento
- Montar as respostas esperadas pela plataforma

Subpastas:
- connectors/: recebimento do webhook (limite de corpo, JSON)
- normalizers/: conversão de envelopes externos → MeetingRequest
- validators/: validação de campos
- payload_builders/: envelopes de resposta
- routes/: endpoints HTTP
"""
