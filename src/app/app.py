"""Entrypoint do painel de vendedores.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.observability import reset_correlation_id, set_correlation_id
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

    from app.coordinators.vendedores import VendedorPanel

# Logging antes de qualquer import que crie loggers com handlers
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Ciclo de vida: monta o painel, faz a carga inicial e fecha conexões."""
    logger.info("app_starting", extra={"service": "painel-vendedores"})
    validate_runtime_settings()

    if getattr(app.state, "panel", None) is None:
        from app.bootstrap.dependencies import create_vendedor_panel

        app.state.panel = create_vendedor_panel()

    panel: VendedorPanel = app.state.panel
    loaded = await panel.list.refresh()
    if not loaded:
        logger.warning("initial_load_failed", extra={"error_code": panel.list.last_error})

    yield

    logger.info("app_shutting_down", extra={"service": "painel-vendedores"})
    panel.close()
    close_async = getattr(panel.gateway, "aclose", None)
    if callable(close_async):
        await close_async()


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga `x-correlation-id` (ou gera um) para os logs da requisição."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        return await call_next(request)
    finally:
        reset_correlation_id(token)


def create_app(panel: VendedorPanel | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        panel: Painel já montado (testes); se None, o lifespan cria um
            a partir das settings.
    """
    fastapi_app = FastAPI(
        title="Painel de Vendedores",
        description="CRUD de vendedores e links de onboarding Mercado Pago",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.panel = panel

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_middleware)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "painel-vendedores"})
    return fastapi_app


app = create_app()


def main() -> None:
    """Execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting painel de vendedores in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
