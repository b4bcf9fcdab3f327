"""API: camada de borda e adapters de GitHub e Telegram.

Responsabilidades:
- Receber requests externos (webhooks, updates do bot, admin)
- Validar assinaturas e payloads
- Normalizar dados para modelos internos
- Construir payloads para a Bot API

Subpastas:
- connectors/: adapters HTTP (assinatura GitHub, cliente da Bot API)
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção de payloads para a Bot API
- routes/: endpoints HTTP (webhooks, status, registro, health)

NÃO PODE conter: regras de formatação, orquestração de use cases.
"""
