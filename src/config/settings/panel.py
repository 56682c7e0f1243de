"""Settings do painel (paginação, capacidade de edição, link de onboarding)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

GatewayBackend = Literal["memory", "supabase"]

DEFAULT_ONBOARDING_BASE_URL = "https://www.mercadopago.com.br/authorization"


@dataclass(frozen=True)
class PanelSettings:
    """Configurações do painel de vendedores.

    Attributes:
        page_size: Linhas por página
        can_edit: False para a visão de parceiro (somente leitura + links)
        copy_feedback_seconds: Tempo que o indicador "Copiado!" fica ativo
        onboarding_base_url: Endpoint de autorização do provedor de pagamento
        gateway_backend: Backend de dados (memory|supabase)
    """

    page_size: int = 10
    can_edit: bool = True
    copy_feedback_seconds: float = 2.0
    onboarding_base_url: str = DEFAULT_ONBOARDING_BASE_URL
    gateway_backend: GatewayBackend = "supabase"

    def validate(self) -> list[str]:
        """Valida configurações do painel.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.page_size < 1:
            errors.append("PANEL_PAGE_SIZE deve ser >= 1")

        if self.copy_feedback_seconds <= 0:
            errors.append("PANEL_COPY_FEEDBACK_SECONDS deve ser > 0")

        if not self.onboarding_base_url.startswith("https://"):
            errors.append("ONBOARDING_BASE_URL deve usar https://")

        if self.gateway_backend not in {"memory", "supabase"}:
            errors.append(f"VENDEDOR_GATEWAY_BACKEND inválido: {self.gateway_backend}")

        return errors


def _load_panel_from_env() -> PanelSettings:
    backend_str = os.getenv("VENDEDOR_GATEWAY_BACKEND", "supabase").lower()
    backend: GatewayBackend = "memory" if backend_str == "memory" else "supabase"
    return PanelSettings(
        page_size=int(os.getenv("PANEL_PAGE_SIZE", "10")),
        can_edit=os.getenv("PANEL_CAN_EDIT", "true").lower() in ("true", "1", "yes"),
        copy_feedback_seconds=float(os.getenv("PANEL_COPY_FEEDBACK_SECONDS", "2.0")),
        onboarding_base_url=os.getenv("ONBOARDING_BASE_URL", DEFAULT_ONBOARDING_BASE_URL),
        gateway_backend=backend,
    )


@lru_cache(maxsize=1)
def get_panel_settings() -> PanelSettings:
    """Retorna instância cacheada de PanelSettings."""
    return _load_panel_from_env()
