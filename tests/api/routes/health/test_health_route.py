"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from tests.fakes.fake_vendedor_gateway import FakeVendedorGateway


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_is_always_healthy() -> None:
    response = await health_check()
    assert response.status == "healthy"
    assert response.service == "painel-vendedores"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_panel() -> None:
    request = _build_request_with_state(SimpleNamespace(panel=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["vendedores_backend"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_backend_answers() -> None:
    panel = SimpleNamespace(gateway=FakeVendedorGateway())
    request = _build_request_with_state(SimpleNamespace(panel=panel))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["vendedores_backend"]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_reports_unreachable_backend() -> None:
    gateway = FakeVendedorGateway()
    gateway.fail("search")
    request = _build_request_with_state(SimpleNamespace(panel=SimpleNamespace(gateway=gateway)))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["vendedores_backend"]["error"] == "unreachable"


@pytest.mark.asyncio
async def test_readiness_reports_ping_exception() -> None:
    gateway = SimpleNamespace(ping=AsyncMock(side_effect=ConnectionError("down")))
    request = _build_request_with_state(SimpleNamespace(panel=SimpleNamespace(gateway=gateway)))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["vendedores_backend"]["error"] == "ConnectionError"
