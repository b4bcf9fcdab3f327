"""Rotas do webhook GitHub."""

from __future__ import annotations

from api.routes.github.webhook import router

__all__ = ["router"]
