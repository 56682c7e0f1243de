"""Formulário de criação/edição de vendedor."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from app.coordinators.vendedores.models import FormBuffer, FormOutcome
from app.coordinators.vendedores.validation import validate_form
from app.observability import record_panel_event
from utils.errors import FormValidationError

if TYPE_CHECKING:
    from app.coordinators.vendedores.list_controller import VendedorListController
    from app.domain.vendedor import Vendedor
    from app.protocols.vendedor_gateway import VendedorGatewayProtocol

logger = logging.getLogger(__name__)

FORM_FIELDS = frozenset({"nome", "email", "status_integracao"})


class VendedorFormController:
    """Dono do buffer de edição e do fluxo de submit.

    Sucesso fecha o formulário, limpa o buffer e recarrega a lista
    (página 1 após criar, página atual após editar). Falha de backend
    mantém o formulário aberto com o buffer intacto.
    """

    def __init__(
        self,
        gateway: VendedorGatewayProtocol,
        list_controller: VendedorListController,
    ) -> None:
        self._gateway = gateway
        self._list = list_controller
        self._buffer = FormBuffer()
        self._is_open = False
        self._is_submitting = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def is_editing(self) -> bool:
        return self._buffer.edit_target_id is not None

    @property
    def buffer(self) -> FormBuffer:
        return replace(self._buffer)

    def open_for_create(self) -> None:
        self._buffer = FormBuffer()
        self._is_open = True

    def open_for_edit(self, record: Vendedor) -> None:
        self._buffer = FormBuffer(
            nome=record.nome,
            email=record.email,
            status_integracao=record.status_integracao or "",
            edit_target_id=record.id,
        )
        self._is_open = True

    def update_field(self, key: str, value: str) -> None:
        """Atualiza um campo editável do buffer.

        Com o formulário fechado a chamada é ignorada.

        Raises:
            ValueError: Campo desconhecido (o id nunca é editável).
        """
        if key not in FORM_FIELDS:
            raise ValueError(f"Campo não editável: {key}")
        if not self._is_open:
            logger.debug("vendedor_form_update_ignored", extra={"field": key})
            return
        setattr(self._buffer, key, value)

    def cancel(self) -> None:
        self._is_open = False
        self._buffer = FormBuffer()

    async def submit(self) -> FormOutcome:
        if not self._is_open:
            return FormOutcome(success=False, error_code="FORM_CLOSED")
        if self._is_submitting:
            return FormOutcome(success=False, error_code="SUBMIT_IN_PROGRESS")

        try:
            payload = validate_form(self._buffer)
        except FormValidationError as exc:
            logger.info(
                "vendedor_form_invalid",
                extra={"field": exc.field, "reason": exc.reason},
            )
            return FormOutcome(
                success=False,
                error_code="VALIDATION_ERROR",
                error_field=exc.field,
            )

        submitted = self._buffer
        target_id = submitted.edit_target_id
        operation = "update" if target_id is not None else "insert"
        self._is_submitting = True
        try:
            if target_id is not None:
                result = await self._gateway.update(target_id, payload.to_row())
            else:
                result = await self._gateway.insert(payload.to_row())
        finally:
            self._is_submitting = False

        if not result.ok:
            logger.warning(
                "vendedor_form_submit_failed",
                extra={"operation": operation, "error_code": result.error},
            )
            record_panel_event("vendedor_form", f"{operation}_failed")
            return FormOutcome(success=False, error_code="BACKEND_ERROR")

        saved_id = target_id or (result.data[0].id if result.data else None)
        # Cancelar e reabrir durante a chamada troca o buffer; o novo fica intacto
        if self._buffer is submitted:
            self.cancel()
        record_panel_event("vendedor_form", f"{operation}_ok")

        if operation == "insert":
            await self._list.reload_first_page()
        else:
            await self._list.refresh()
        return FormOutcome(success=True, vendedor_id=saved_id)
