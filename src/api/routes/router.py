"""Agregador de rotas.

Este módulo cria o router principal da API e inclui os sub-routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.webhook.create_event import router as webhook_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health e descrição da API (sem prefixo, na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Webhook de tool calls
    api_router.include_router(
        webhook_router,
        prefix="/webhook",
        tags=["webhook"],
    )

    return api_router
