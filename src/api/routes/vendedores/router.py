"""Rotas do painel de vendedores.

Cada rota delega ao `VendedorPanel` guardado em `app.state.panel` e
devolve o snapshot atualizado do painel.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.routes.vendedores.schemas import (
    DeleteRequest,
    DeleteResponse,
    FormFieldRequest,
    LinkResponse,
    OpenFormRequest,
    PageRequest,
    SearchRequest,
    SubmitResponse,
)
from app.coordinators.vendedores import PanelSnapshot, VendedorNotFoundError, VendedorPanel
from utils.errors import PendingDeleteError, ReadOnlyPanelError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_panel(request: Request) -> VendedorPanel:
    panel = getattr(request.app.state, "panel", None)
    if panel is None:
        raise HTTPException(status.HTTP_503_SERVICE_UNAVAILABLE, detail="panel_not_ready")
    return panel


PanelDep = Annotated[VendedorPanel, Depends(get_panel)]


def _read_only(exc: ReadOnlyPanelError) -> HTTPException:
    return HTTPException(status.HTTP_403_FORBIDDEN, detail=str(exc))


def _not_found(vendedor_id: str) -> HTTPException:
    return HTTPException(status.HTTP_404_NOT_FOUND, detail=f"vendedor_not_found:{vendedor_id}")


# ── Listagem ────────────────────────────────────────────────────────────────


@router.get("", response_model=PanelSnapshot)
async def get_snapshot(panel: PanelDep) -> PanelSnapshot:
    return panel.snapshot()


@router.post("/refresh", response_model=PanelSnapshot)
async def refresh(panel: PanelDep) -> PanelSnapshot:
    await panel.list.refresh()
    return panel.snapshot()


@router.put("/search", response_model=PanelSnapshot)
async def set_search_term(body: SearchRequest, panel: PanelDep) -> PanelSnapshot:
    await panel.list.set_search_term(body.term)
    return panel.snapshot()


@router.put("/page", response_model=PanelSnapshot)
async def set_page(body: PageRequest, panel: PanelDep) -> PanelSnapshot:
    await panel.list.set_page_number(body.page_number)
    return panel.snapshot()


@router.post("/page/next", response_model=PanelSnapshot)
async def next_page(panel: PanelDep) -> PanelSnapshot:
    await panel.list.next_page()
    return panel.snapshot()


@router.post("/page/previous", response_model=PanelSnapshot)
async def previous_page(panel: PanelDep) -> PanelSnapshot:
    await panel.list.previous_page()
    return panel.snapshot()


# ── Formulário ──────────────────────────────────────────────────────────────


@router.post("/form", response_model=PanelSnapshot)
async def open_form(body: OpenFormRequest, panel: PanelDep) -> PanelSnapshot:
    try:
        if body.vendedor_id is None:
            panel.open_create_form()
        else:
            panel.open_edit_form(body.vendedor_id)
    except ReadOnlyPanelError as exc:
        raise _read_only(exc) from exc
    except VendedorNotFoundError as exc:
        raise _not_found(str(body.vendedor_id)) from exc
    return panel.snapshot()


@router.patch("/form", response_model=PanelSnapshot)
async def update_form_field(body: FormFieldRequest, panel: PanelDep) -> PanelSnapshot:
    try:
        panel.update_form_field(body.field, body.value)
    except ReadOnlyPanelError as exc:
        raise _read_only(exc) from exc
    return panel.snapshot()


@router.post("/form/submit", response_model=SubmitResponse)
async def submit_form(panel: PanelDep) -> SubmitResponse:
    try:
        outcome = await panel.submit_form()
    except ReadOnlyPanelError as exc:
        raise _read_only(exc) from exc
    return SubmitResponse(
        success=outcome.success,
        error_code=outcome.error_code,
        error_field=outcome.error_field,
        vendedor_id=outcome.vendedor_id,
        panel=panel.snapshot(),
    )


@router.delete("/form", response_model=PanelSnapshot)
async def cancel_form(panel: PanelDep) -> PanelSnapshot:
    panel.cancel_form()
    return panel.snapshot()


# ── Remoção ─────────────────────────────────────────────────────────────────


@router.post("/delete", response_model=PanelSnapshot)
async def request_delete(body: DeleteRequest, panel: PanelDep) -> PanelSnapshot:
    try:
        panel.request_delete(body.vendedor_id)
    except ReadOnlyPanelError as exc:
        raise _read_only(exc) from exc
    except PendingDeleteError as exc:
        raise HTTPException(status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return panel.snapshot()


@router.post("/delete/confirm", response_model=DeleteResponse)
async def confirm_delete(panel: PanelDep) -> DeleteResponse:
    try:
        deleted = await panel.confirm_delete()
    except ReadOnlyPanelError as exc:
        raise _read_only(exc) from exc
    return DeleteResponse(deleted=deleted, panel=panel.snapshot())


@router.delete("/delete", response_model=PanelSnapshot)
async def dismiss_delete(panel: PanelDep) -> PanelSnapshot:
    panel.dismiss_delete()
    return panel.snapshot()


# ── Links de onboarding ─────────────────────────────────────────────────────


@router.post("/links/{vendedor_id}", response_model=LinkResponse)
async def generate_link(vendedor_id: str, panel: PanelDep) -> LinkResponse:
    try:
        link = panel.generate_link(vendedor_id)
    except VendedorNotFoundError as exc:
        raise _not_found(vendedor_id) from exc
    return LinkResponse(
        vendedor_id=vendedor_id,
        link=link,
        copied=False,
        panel=panel.snapshot(),
    )


@router.post("/links/{vendedor_id}/copy", response_model=LinkResponse)
async def copy_link(vendedor_id: str, panel: PanelDep) -> LinkResponse:
    copied = await panel.copy_link(vendedor_id)
    if not copied:
        logger.info("onboarding_link_copy_without_link", extra={"vendedor_id": vendedor_id})
    return LinkResponse(
        vendedor_id=vendedor_id,
        link=panel.links.link_for(vendedor_id),
        copied=copied,
        panel=panel.snapshot(),
    )
