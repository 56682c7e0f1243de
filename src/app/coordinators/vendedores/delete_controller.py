"""Remoção de vendedor com etapa de confirmação."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import record_panel_event
from utils.errors import PendingDeleteError

if TYPE_CHECKING:
    from app.coordinators.vendedores.list_controller import VendedorListController
    from app.protocols.vendedor_gateway import VendedorGatewayProtocol

logger = logging.getLogger(__name__)


class VendedorDeleteController:
    """Um único slot de remoção pendente (não é fila)."""

    def __init__(
        self,
        gateway: VendedorGatewayProtocol,
        list_controller: VendedorListController,
    ) -> None:
        self._gateway = gateway
        self._list = list_controller
        self._pending_id: str | None = None
        self._is_deleting = False

    @property
    def pending_id(self) -> str | None:
        return self._pending_id

    @property
    def is_deleting(self) -> bool:
        return self._is_deleting

    def request_delete(self, vendedor_id: str) -> None:
        """Marca o vendedor para remoção e abre a confirmação.

        Raises:
            PendingDeleteError: Outro id já aguarda confirmação.
        """
        if self._pending_id is not None and self._pending_id != vendedor_id:
            raise PendingDeleteError(
                "Confirme ou cancele a remoção pendente antes de pedir outra"
            )
        self._pending_id = vendedor_id

    def dismiss(self) -> None:
        self._pending_id = None

    async def confirm(self) -> bool:
        """Remove o vendedor pendente e recarrega a lista.

        Se a página atual ficar vazia e não for a primeira, volta uma
        página. Em falha o id continua pendente.

        Returns:
            True se a remoção foi aceita pelo backend.
        """
        vendedor_id = self._pending_id
        if vendedor_id is None or self._is_deleting:
            return False

        self._is_deleting = True
        try:
            result = await self._gateway.delete(vendedor_id)
        finally:
            self._is_deleting = False

        if not result.ok:
            logger.warning(
                "vendedor_delete_failed",
                extra={"vendedor_id": vendedor_id, "error_code": result.error},
            )
            record_panel_event("vendedor_delete", "failed")
            return False

        # O slot pode ter sido trocado durante a chamada
        if self._pending_id == vendedor_id:
            self._pending_id = None
        record_panel_event("vendedor_delete", "ok")

        refreshed = await self._list.refresh()
        if refreshed and not self._list.records and self._list.page_number > 1:
            logger.info(
                "vendedor_delete_page_step_back",
                extra={"page_number": self._list.page_number},
            )
            await self._list.previous_page()
        return True
