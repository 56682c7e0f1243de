"""Estado da listagem de vendedores: busca, paginação e refresh.

Cada mudança efetiva de (termo, página) dispara exatamente uma busca.
Buscas concorrentes não são canceladas; cada uma recebe um número de
sequência e só a resposta da busca mais recente é aplicada. Respostas
antigas que chegam depois são descartadas.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.vendedor import Vendedor
    from app.protocols.vendedor_gateway import VendedorGatewayProtocol

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


class VendedorListController:
    """Dono do termo de busca, página atual, registros e total.

    Args:
        gateway: Backend de dados.
        page_size: Linhas por página.
    """

    def __init__(
        self,
        gateway: VendedorGatewayProtocol,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size deve ser >= 1")
        self._gateway = gateway
        self._page_size = page_size
        self._search_term = ""
        self._page_number = 1
        self._records: list[Vendedor] = []
        self._total_count = 0
        self._last_error: str | None = None
        self._last_issued = 0
        self._in_flight: set[int] = set()

    # ── Estado derivado ─────────────────────────────────────────────────────

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def page_number(self) -> int:
        return self._page_number

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def records(self) -> list[Vendedor]:
        return list(self._records)

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def total_pages(self) -> int:
        """ceil(total / page_size); 0 quando não há registros."""
        return math.ceil(self._total_count / self._page_size)

    @property
    def is_loading(self) -> bool:
        """True enquanto houver qualquer busca em andamento."""
        return bool(self._in_flight)

    @property
    def has_previous(self) -> bool:
        return self._page_number > 1

    @property
    def has_next(self) -> bool:
        return self._page_number < self.total_pages

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 1

    @property
    def last_error(self) -> str | None:
        """Código da última busca que falhou (None após um sucesso)."""
        return self._last_error

    # ── Operações ───────────────────────────────────────────────────────────

    async def set_search_term(self, term: str) -> bool:
        """Troca o termo de busca e volta para a página 1.

        Returns:
            True se uma busca foi feita e aplicada.
        """
        if term == self._search_term and self._page_number == 1:
            return False
        self._search_term = term
        self._page_number = 1
        return await self._fetch()

    async def set_page_number(self, page_number: int) -> bool:
        """Vai para a página informada, limitada a [1, última página].

        Raises:
            ValueError: Se page_number < 1.
        """
        if page_number < 1:
            raise ValueError("page_number deve ser >= 1")
        clamped = min(page_number, max(self.total_pages, 1))
        if clamped == self._page_number:
            return False
        self._page_number = clamped
        return await self._fetch()

    async def next_page(self) -> bool:
        if not self.has_next:
            return False
        return await self.set_page_number(self._page_number + 1)

    async def previous_page(self) -> bool:
        if not self.has_previous:
            return False
        return await self.set_page_number(self._page_number - 1)

    async def refresh(self) -> bool:
        """Refaz a busca para o (termo, página) atual."""
        return await self._fetch()

    async def reload_first_page(self) -> bool:
        """Volta para a página 1 e busca (uma única requisição)."""
        self._page_number = 1
        return await self._fetch()

    async def _fetch(self) -> bool:
        self._last_issued += 1
        request_id = self._last_issued
        term = self._search_term
        offset = (self._page_number - 1) * self._page_size

        self._in_flight.add(request_id)
        try:
            result = await self._gateway.search(term, offset, self._page_size)
        finally:
            self._in_flight.discard(request_id)

        if request_id != self._last_issued:
            logger.debug(
                "vendedores_fetch_stale_discarded",
                extra={"request_id": request_id, "latest_request_id": self._last_issued},
            )
            return False

        if not result.ok:
            self._last_error = result.error
            log_fallback(logger, "vendedor_list", reason=result.error)
            return False

        # Registros e total vêm sempre da mesma resposta
        self._records = list(result.data or [])
        self._total_count = result.count or 0
        self._last_error = None
        logger.info(
            "vendedores_fetch_ok",
            extra={
                "page_number": self._page_number,
                "row_count": len(self._records),
                "total_count": self._total_count,
                "filtered": bool(term),
            },
        )
        return True
