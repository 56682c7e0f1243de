"""Endpoints de health check."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: o processo está de pé."""
    return HealthResponse(
        status="healthy",
        service="painel-vendedores",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: o backend de vendedores responde."""
    panel = getattr(request.app.state, "panel", None)
    gateway = getattr(panel, "gateway", None)
    backend_check = await _check_gateway(gateway)
    ready = backend_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"vendedores_backend": backend_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_gateway(gateway: Any | None) -> DependencyCheck:
    ping = getattr(gateway, "ping", None)
    if ping is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        reachable = await asyncio.wait_for(ping(), timeout=5.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_gateway_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = round((time.perf_counter() - started_at) * 1000, 2)
    if not reachable:
        return DependencyCheck(status="failed", latency_ms=latency_ms, error="unreachable")
    return DependencyCheck(status="ok", latency_ms=latency_ms)
