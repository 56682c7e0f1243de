"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta as
implementações concretas (Supabase/memória) aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_panel_settings,
    get_supabase_settings,
)

SERVICE_NAME = "painel_vendedores"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Erros de base/painel derrubam o boot em staging/production.
    Credenciais do Supabase ausentes só geram alerta: o serviço sobe com
    placeholders e o painel fica sem dados.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS

    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"panel: {error}" for error in get_panel_settings().validate())

    supabase = get_supabase_settings()
    warnings = [f"supabase: {error}" for error in supabase.validate()]
    if warnings:
        logger.warning(
            "supabase_settings_incomplete",
            extra={
                "component": "bootstrap",
                "environment": base.environment,
                "warnings": warnings,
                "placeholder": supabase.is_placeholder,
            },
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
