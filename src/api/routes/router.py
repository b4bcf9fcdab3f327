"""Agregador de rotas do relay.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.github import router as github_router
from api.routes.health.router import router as health_router
from api.routes.telegram import admin_router, webhook_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Os caminhos ficam completos em cada router (sem prefixo aqui).

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(github_router, tags=["github"])
    api_router.include_router(webhook_router, tags=["telegram"])
    api_router.include_router(admin_router, tags=["admin"])

    return api_router
