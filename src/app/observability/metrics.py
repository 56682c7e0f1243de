"""Métricas registradas como logs estruturados.

Uso:
    started_at = time.perf_counter()
    ...
    record_latency("supabase_gateway", "search", (time.perf_counter() - started_at) * 1000)
    record_panel_event("vendedor_delete", "confirmed")
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
) -> None:
    """Registra latência de uma operação.

    Args:
        component: Componente (ex: "supabase_gateway")
        operation: Operação (ex: "search", "insert")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": get_correlation_id(),
        },
    )


def record_panel_event(component: str, outcome: str) -> None:
    """Conta um evento do painel (submit, delete, cópia de link)."""
    logger.info(
        "metric_panel_event",
        extra={
            "metric_type": "counter",
            "component": component,
            "outcome": outcome,
            "correlation_id": get_correlation_id(),
        },
    )
