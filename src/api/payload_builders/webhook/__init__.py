"""Respostas JSON do webhook e das rotas de serviço."""

from .responses import (
    AVAILABLE_ENDPOINTS,
    build_error_payload,
    build_health_payload,
    build_not_found_payload,
    build_service_info_payload,
    build_success_payload,
)

__all__ = [
    "AVAILABLE_ENDPOINTS",
    "build_error_payload",
    "build_health_payload",
    "build_not_found_payload",
    "build_service_info_payload",
    "build_success_payload",
]
