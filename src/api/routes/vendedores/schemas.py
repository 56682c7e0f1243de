"""Schemas de request/response das rotas do painel."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from app.coordinators.vendedores.models import PanelSnapshot


class SearchRequest(BaseModel):
    term: str = ""


class PageRequest(BaseModel):
    page_number: int = Field(..., ge=1)


class OpenFormRequest(BaseModel):
    """Sem `vendedor_id` abre para criação; com id, para edição."""

    vendedor_id: str | None = None


class FormFieldRequest(BaseModel):
    field: Literal["nome", "email", "status_integracao"]
    value: str


class DeleteRequest(BaseModel):
    vendedor_id: str


class SubmitResponse(BaseModel):
    success: bool
    error_code: str | None = None
    error_field: str | None = None
    vendedor_id: str | None = None
    panel: PanelSnapshot


class DeleteResponse(BaseModel):
    deleted: bool
    panel: PanelSnapshot


class LinkResponse(BaseModel):
    vendedor_id: str
    link: str | None
    copied: bool
    panel: PanelSnapshot
