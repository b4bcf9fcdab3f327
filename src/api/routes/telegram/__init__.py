"""Rotas do bot Telegram: updates do bot e administração do webhook."""

from __future__ import annotations

from api.routes.telegram.admin import router as admin_router
from api.routes.telegram.webhook import router as webhook_router

__all__ = ["admin_router", "webhook_router"]
