"""Painel de vendedores: compõe listagem, formulário, remoção e links.

Um único conjunto de coordinators atende as duas visões do painel:
- `can_edit=True`: CRUD completo;
- `can_edit=False`: visão de parceiro (busca, paginação e links apenas).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.coordinators.vendedores.delete_controller import VendedorDeleteController
from app.coordinators.vendedores.form_controller import VendedorFormController
from app.coordinators.vendedores.links import OnboardingLinkBoard
from app.coordinators.vendedores.list_controller import VendedorListController
from app.coordinators.vendedores.models import (
    DeleteView,
    FormOutcome,
    FormView,
    PaginationView,
    PanelSnapshot,
    VendedorRow,
)
from config.settings import PanelSettings
from utils.errors import ReadOnlyPanelError

if TYPE_CHECKING:
    from app.domain.vendedor import Vendedor
    from app.protocols.clipboard import ClipboardProtocol
    from app.protocols.vendedor_gateway import VendedorGatewayProtocol

logger = logging.getLogger(__name__)


class VendedorNotFoundError(LookupError):
    """Id não está na página carregada."""


class VendedorPanel:
    """Fachada usada pela camada HTTP.

    Args:
        gateway: Backend de dados.
        clipboard: Destino do "Copiar" dos links.
        settings: Paginação, capacidade de edição e link de onboarding.
    """

    def __init__(
        self,
        gateway: VendedorGatewayProtocol,
        clipboard: ClipboardProtocol,
        settings: PanelSettings | None = None,
    ) -> None:
        self._settings = settings or PanelSettings()
        self._gateway = gateway
        self.list = VendedorListController(gateway, page_size=self._settings.page_size)
        self.form = VendedorFormController(gateway, self.list)
        self.deletion = VendedorDeleteController(gateway, self.list)
        self.links = OnboardingLinkBoard(
            clipboard,
            base_url=self._settings.onboarding_base_url,
            feedback_seconds=self._settings.copy_feedback_seconds,
        )

    @property
    def can_edit(self) -> bool:
        return self._settings.can_edit

    @property
    def gateway(self) -> VendedorGatewayProtocol:
        return self._gateway

    def find_record(self, vendedor_id: str) -> Vendedor:
        """Vendedor da página atual pelo id.

        Raises:
            VendedorNotFoundError: Id fora da página carregada.
        """
        for record in self.list.records:
            if record.id == vendedor_id:
                return record
        raise VendedorNotFoundError(vendedor_id)

    # ── Formulário ──────────────────────────────────────────────────────────

    def open_create_form(self) -> None:
        self._require_edit("open_create_form")
        self.form.open_for_create()

    def open_edit_form(self, vendedor_id: str) -> None:
        self._require_edit("open_edit_form")
        self.form.open_for_edit(self.find_record(vendedor_id))

    def update_form_field(self, key: str, value: str) -> None:
        self._require_edit("update_form_field")
        self.form.update_field(key, value)

    async def submit_form(self) -> FormOutcome:
        self._require_edit("submit_form")
        return await self.form.submit()

    def cancel_form(self) -> None:
        self.form.cancel()

    # ── Remoção ─────────────────────────────────────────────────────────────

    def request_delete(self, vendedor_id: str) -> None:
        self._require_edit("request_delete")
        self.deletion.request_delete(vendedor_id)

    async def confirm_delete(self) -> bool:
        self._require_edit("confirm_delete")
        return await self.deletion.confirm()

    def dismiss_delete(self) -> None:
        self.deletion.dismiss()

    # ── Links ───────────────────────────────────────────────────────────────

    def generate_link(self, vendedor_id: str) -> str:
        return self.links.generate(self.find_record(vendedor_id))

    async def copy_link(self, vendedor_id: str) -> bool:
        return await self.links.copy(vendedor_id)

    # ── View ────────────────────────────────────────────────────────────────

    def snapshot(self) -> PanelSnapshot:
        rows = [
            VendedorRow(
                id=record.id,
                nome=record.nome,
                email=record.email,
                status_integracao=record.status_integracao,
                display_status=record.display_status,
                generated_link=self.links.link_for(record.id),
                copied=self.links.is_copied(record.id),
            )
            for record in self.list.records
        ]
        pagination = PaginationView(
            page_number=self.list.page_number,
            page_size=self.list.page_size,
            total_pages=self.list.total_pages,
            has_previous=self.list.has_previous,
            has_next=self.list.has_next,
            visible=self.list.show_pagination,
        )
        form_view = None
        delete_view = None
        if self.can_edit:
            buffer = self.form.buffer
            form_view = FormView(
                is_open=self.form.is_open,
                is_editing=self.form.is_editing,
                is_submitting=self.form.is_submitting,
                nome=buffer.nome,
                email=buffer.email,
                status_integracao=buffer.status_integracao,
                edit_target_id=buffer.edit_target_id,
            )
            delete_view = DeleteView(
                pending_id=self.deletion.pending_id,
                is_deleting=self.deletion.is_deleting,
            )
        return PanelSnapshot(
            can_edit=self.can_edit,
            search_term=self.list.search_term,
            total_count=self.list.total_count,
            is_loading=self.list.is_loading,
            last_error=self.list.last_error,
            rows=rows,
            pagination=pagination,
            form=form_view,
            delete=delete_view,
        )

    def close(self) -> None:
        self.links.close()

    def _require_edit(self, operation: str) -> None:
        if not self.can_edit:
            logger.info("read_only_panel_rejected", extra={"operation": operation})
            raise ReadOnlyPanelError(f"Painel somente leitura: {operation} indisponível")
