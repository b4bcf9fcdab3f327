"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhooks, status, registro, health)
- Validação inicial de request (headers, query params, JSON)
- Delegação para connectors/use_cases
- Envelope {code, message} com o status HTTP correspondente

Estrutura:
- routes/github/: webhook do GitHub
- routes/telegram/: updates do bot, /status e /register
- routes/health/: liveness
- responses.py: envelope e handler de HTTPException
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
