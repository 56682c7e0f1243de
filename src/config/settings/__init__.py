"""Agregador de settings do painel de vendedores.

Cada domínio de configuração vive em seu módulo; aqui só re-exportamos.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.panel import (
    DEFAULT_ONBOARDING_BASE_URL,
    GatewayBackend,
    PanelSettings,
    get_panel_settings,
)
from config.settings.supabase import (
    PLACEHOLDER_ANON_KEY,
    PLACEHOLDER_URL,
    SupabaseSettings,
    get_supabase_settings,
)

__all__ = [
    "DEFAULT_ONBOARDING_BASE_URL",
    "PLACEHOLDER_ANON_KEY",
    "PLACEHOLDER_URL",
    "BaseSettings",
    "Environment",
    "GatewayBackend",
    "PanelSettings",
    "SupabaseSettings",
    "get_base_settings",
    "get_panel_settings",
    "get_supabase_settings",
]
