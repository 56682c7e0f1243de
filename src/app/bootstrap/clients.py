"""Factories de clientes externos (HTTP do Supabase)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import HttpClient, HttpClientConfig
from app.infra.supabase import build_auth_headers

if TYPE_CHECKING:
    import httpx

    from config.settings import SupabaseSettings

logger = logging.getLogger(__name__)


def create_supabase_http_client(
    settings: SupabaseSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpClient:
    """Cria cliente HTTP com headers de auth do Supabase.

    Args:
        settings: URL/chave/timeout do Supabase.
        transport: Transport alternativo (testes).

    Returns:
        HttpClient pronto para o gateway.
    """
    client = HttpClient(
        HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds,
            default_headers=build_auth_headers(settings.anon_key),
        ),
        transport=transport,
    )
    logger.info(
        "supabase_http_client_created",
        extra={"placeholder": settings.is_placeholder, "table": settings.table},
    )
    return client
