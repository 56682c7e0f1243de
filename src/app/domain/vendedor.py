"""Vendedor - parceiro gerenciado pelo painel.

Os nomes dos campos seguem o schema da tabela `vendedores` e trafegam
sem renomeação entre backend e view.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

STATUS_ATIVO = "ativo"
STATUS_PENDENTE = "pendente"
KNOWN_STATUSES = (STATUS_ATIVO, STATUS_PENDENTE)

# Colunas pedidas ao backend, na ordem do select
VENDEDOR_COLUMNS = ("id", "nome", "email", "status_integracao")


class Vendedor(BaseModel):
    """Linha da tabela `vendedores`."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Identificador atribuído pelo backend")
    nome: str
    email: str
    status_integracao: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        # Tabelas com PK inteira devolvem número; o painel trata id como opaco
        if value is None:
            raise ValueError("id obrigatório")
        return str(value)

    @property
    def display_status(self) -> str:
        """Status exibido na tabela; vazio/ausente vira "pendente"."""
        return self.status_integracao or STATUS_PENDENTE

    @property
    def is_active(self) -> bool:
        return self.status_integracao == STATUS_ATIVO

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Vendedor:
        return cls.model_validate(row)


class VendedorInput(BaseModel):
    """Campos enviados em insert/update (sem id)."""

    model_config = ConfigDict(extra="forbid")

    nome: str
    email: str
    status_integracao: str | None = None

    def to_row(self) -> dict[str, Any]:
        """Payload para o backend; status vazio é enviado como null."""
        return {
            "nome": self.nome,
            "email": self.email,
            "status_integracao": self.status_integracao or None,
        }
