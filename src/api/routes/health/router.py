"""Endpoints de serviço: health check e descrição da API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from api.payload_builders.webhook import build_health_payload, build_service_info_payload

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Liveness probe — verifica se o serviço está rodando."""
    return build_health_payload()


@router.get("/")
async def service_info() -> dict[str, Any]:
    """Lista os endpoints disponíveis."""
    return build_service_info_payload()
