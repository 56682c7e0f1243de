"""Modelos de estado e resultado dos coordinators de vendedores."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass
class FormBuffer:
    """Buffer de edição do formulário.

    `edit_target_id` None indica criação; caso contrário, atualização
    do vendedor com esse id.
    """

    nome: str = ""
    email: str = ""
    status_integracao: str = ""
    edit_target_id: str | None = None


@dataclass(frozen=True, slots=True)
class FormOutcome:
    """Resultado de um submit do formulário."""

    success: bool
    error_code: str | None = None
    error_field: str | None = None
    vendedor_id: str | None = None


class VendedorRow(BaseModel):
    """Linha da tabela com o estado transitório de link/cópia."""

    id: str
    nome: str
    email: str
    status_integracao: str | None = None
    display_status: str
    generated_link: str | None = None
    copied: bool = False


class PaginationView(BaseModel):
    page_number: int = Field(..., ge=1)
    page_size: int
    total_pages: int = Field(..., ge=0)
    has_previous: bool
    has_next: bool
    visible: bool


class FormView(BaseModel):
    is_open: bool
    is_editing: bool
    is_submitting: bool
    nome: str = ""
    email: str = ""
    status_integracao: str = ""
    edit_target_id: str | None = None


class DeleteView(BaseModel):
    pending_id: str | None = None
    is_deleting: bool = False


class PanelSnapshot(BaseModel):
    """Estado completo do painel entregue à view."""

    can_edit: bool
    search_term: str
    total_count: int = Field(..., ge=0)
    is_loading: bool
    last_error: str | None = None
    rows: list[VendedorRow]
    pagination: PaginationView
    form: FormView | None = None
    delete: DeleteView | None = None
