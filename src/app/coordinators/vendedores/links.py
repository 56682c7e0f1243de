"""Link de onboarding do Mercado Pago por vendedor.

O link depende apenas do id do vendedor. O estado "gerado" e "copiado"
é mantido por id durante a vida do processo e não é afetado por refresh
da lista.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.observability import record_panel_event
from config.settings.panel import DEFAULT_ONBOARDING_BASE_URL

if TYPE_CHECKING:
    from app.domain.vendedor import Vendedor
    from app.protocols.clipboard import ClipboardProtocol

logger = logging.getLogger(__name__)

COPY_FEEDBACK_SECONDS = 2.0


def build_onboarding_link(
    vendedor_id: str,
    base_url: str = DEFAULT_ONBOARDING_BASE_URL,
) -> str:
    """Monta a URL de autorização com o id como `user_id`.

    >>> build_onboarding_link("7")
    'https://www.mercadopago.com.br/authorization?user_id=7'
    """
    return f"{base_url}?user_id={vendedor_id}"


class OnboardingLinkBoard:
    """Links gerados e indicadores "copiado" por vendedor.

    Cada id tem seu próprio timer de retorno do indicador; copiar de novo
    o mesmo id reinicia apenas o timer dele.
    """

    def __init__(
        self,
        clipboard: ClipboardProtocol,
        base_url: str = DEFAULT_ONBOARDING_BASE_URL,
        feedback_seconds: float = COPY_FEEDBACK_SECONDS,
    ) -> None:
        self._clipboard = clipboard
        self._base_url = base_url
        self._feedback_seconds = feedback_seconds
        self._links: dict[str, str] = {}
        self._copied: dict[str, bool] = {}
        self._timers: dict[str, asyncio.TimerHandle] = {}

    @property
    def generated_links(self) -> dict[str, str]:
        return dict(self._links)

    @property
    def copied(self) -> dict[str, bool]:
        return dict(self._copied)

    def link_for(self, vendedor_id: str) -> str | None:
        return self._links.get(vendedor_id)

    def is_copied(self, vendedor_id: str) -> bool:
        return self._copied.get(vendedor_id, False)

    def generate(self, record: Vendedor) -> str:
        """Gera (ou regenera) o link do vendedor e zera o "copiado"."""
        link = build_onboarding_link(record.id, self._base_url)
        self._links[record.id] = link
        self._cancel_timer(record.id)
        self._copied[record.id] = False
        return link

    async def copy(self, vendedor_id: str) -> bool:
        """Copia o link já gerado para a área de transferência.

        Returns:
            False quando ainda não há link para o id.
        """
        link = self._links.get(vendedor_id)
        if link is None:
            return False

        await self._clipboard.write_text(link)
        self._copied[vendedor_id] = True
        self._schedule_reset(vendedor_id)
        record_panel_event("onboarding_link", "copied")
        return True

    def close(self) -> None:
        """Cancela timers pendentes (shutdown)."""
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()

    def _schedule_reset(self, vendedor_id: str) -> None:
        self._cancel_timer(vendedor_id)
        loop = asyncio.get_running_loop()
        self._timers[vendedor_id] = loop.call_later(
            self._feedback_seconds, self._reset_copied, vendedor_id
        )

    def _cancel_timer(self, vendedor_id: str) -> None:
        handle = self._timers.pop(vendedor_id, None)
        if handle is not None:
            handle.cancel()

    def _reset_copied(self, vendedor_id: str) -> None:
        self._timers.pop(vendedor_id, None)
        self._copied[vendedor_id] = False
