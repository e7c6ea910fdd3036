"""Entrypoint da aplicação voice-scheduler.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.payload_builders.webhook import build_error_payload, build_not_found_payload
from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import CorrelationIdMiddleware
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar .env e logging ANTES de qualquer leitura de settings
initialize_app()

logger = get_logger(__name__)

_ROUTE_MISS_STATUSES = frozenset({status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida configuração no startup e registra shutdown."""
    logger.info("app_starting", extra={"service": "voice-scheduler"})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": "voice-scheduler"})


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Rota inexistente vira 404 com a lista de endpoints."""
    if exc.status_code in _ROUTE_MISS_STATUSES:
        logger.info(
            "route_not_found",
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(
            content=build_not_found_payload(),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return JSONResponse(
        content=build_error_payload(str(exc.detail), echo_tool_call_id=False),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="voice-scheduler",
        description="Webhook de tool calls de voz para criação de eventos no Google Calendar",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.add_middleware(CorrelationIdMiddleware)
    fastapi_app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "voice-scheduler"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    port = get_base_settings().port
    logger.info("server_starting", extra={"port": port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=port,
        reload=get_base_settings().is_development,
    )


if __name__ == "__main__":
    main()
