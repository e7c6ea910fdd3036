"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: carrega o .env, configura logging
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_create_event_use_case

    # Na inicialização do serviço
    initialize_app()

    # Obter use case (singleton)
    use_case = get_create_event_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_calendar_settings

# Nome do serviço para logs
SERVICE_NAME = "voice_scheduler"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço, antes de qualquer
    leitura de settings (as settings são cacheadas).
    """
    load_dotenv()
    settings = get_base_settings()

    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name.replace("-", "_") or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base_settings = get_base_settings()
    environment = base_settings.environment
    errors: list[str] = [f"base: {error}" for error in base_settings.validate()]
    errors.extend(
        f"calendar: {error}" for error in get_calendar_settings().validate_credentials()
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_calendar_service():
    """Obtém o client de calendário (singleton).

    Returns:
        CalendarServiceProtocol configurado conforme env
    """
    from app.bootstrap.dependencies import create_calendar_service
    return create_calendar_service()


@lru_cache(maxsize=1)
def get_create_event_use_case():
    """Obtém o use case de criação de evento (singleton)."""
    from app.bootstrap.dependencies import create_event_use_case
    return create_event_use_case(get_calendar_service())
