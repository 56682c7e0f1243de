"""Logging estruturado (JSON) do painel de vendedores.

Uso:
    from config.logging import configure_logging, get_logger

    # No bootstrap
    configure_logging(level="INFO", service_name="painel_vendedores")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("vendedores_fetch_ok", extra={"total_count": 25})

Todo log carrega: correlation_id, service, level, logger, message, asctime.
Nunca registrar nome ou e-mail de vendedor (PII).
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
