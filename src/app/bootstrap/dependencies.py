"""Factories do painel: criação das implementações concretas.

Lê VENDEDOR_GATEWAY_BACKEND (via PanelSettings):
- "supabase": SupabaseVendedorGateway (PostgREST)
- "memory": MemoryVendedorGateway (dev/test)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_supabase_http_client
from app.coordinators.vendedores import VendedorPanel
from app.infra.stores import MemoryClipboard, MemoryVendedorGateway
from app.infra.supabase import SupabaseVendedorGateway
from config.settings import (
    get_base_settings,
    get_panel_settings,
    get_supabase_settings,
)

if TYPE_CHECKING:
    from app.protocols.clipboard import ClipboardProtocol
    from app.protocols.vendedor_gateway import VendedorGatewayProtocol
    from config.settings import PanelSettings

logger = logging.getLogger(__name__)


def create_vendedor_gateway(
    settings: PanelSettings | None = None,
) -> VendedorGatewayProtocol:
    """Cria o gateway de vendedores conforme configuração.

    Raises:
        ValueError: Backend desconhecido.
    """
    panel = settings or get_panel_settings()

    if panel.gateway_backend == "supabase":
        supabase = get_supabase_settings()
        gateway = SupabaseVendedorGateway(
            supabase,
            http_client=create_supabase_http_client(supabase),
        )
        logger.info("vendedor_gateway_created", extra={"backend": "supabase"})
        return gateway

    if panel.gateway_backend == "memory":
        environment = get_base_settings().environment
        if environment != "development":
            logger.warning(
                "memory_gateway_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("vendedor_gateway_created", extra={"backend": "memory"})
        return MemoryVendedorGateway()

    msg = f"VENDEDOR_GATEWAY_BACKEND inválido: {panel.gateway_backend}"
    raise ValueError(msg)


def create_clipboard() -> ClipboardProtocol:
    return MemoryClipboard()


def create_vendedor_panel(
    gateway: VendedorGatewayProtocol | None = None,
    clipboard: ClipboardProtocol | None = None,
    settings: PanelSettings | None = None,
) -> VendedorPanel:
    """Monta o painel com as dependências informadas ou as padrão."""
    panel_settings = settings or get_panel_settings()
    return VendedorPanel(
        gateway or create_vendedor_gateway(panel_settings),
        clipboard or create_clipboard(),
        settings=panel_settings,
    )
