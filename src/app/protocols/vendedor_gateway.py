"""Contrato do backend de dados de vendedores.

Toda chamada devolve `QueryResult` no formato (data, count, error):
implementações não propagam exceções de rede/backend para os
coordinators, que tratam qualquer `error` não nulo como falha total.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.vendedor import Vendedor


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Resposta de uma chamada ao backend."""

    data: list[Vendedor] | None = None
    count: int | None = None
    error: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: str, status_code: int | None = None) -> QueryResult:
        return cls(error=error, status_code=status_code)


class VendedorGatewayProtocol(Protocol):
    """Operações consumidas do backend hospedado."""

    async def search(self, term: str, offset: int, limit: int) -> QueryResult:
        """Busca paginada com contagem exata.

        Filtra `nome` por substring case-insensitive quando `term` não é
        vazio e retorna as linhas [offset, offset + limit - 1].
        """
        ...

    async def insert(self, row: dict[str, Any]) -> QueryResult:
        """Insere um vendedor; o backend atribui o id."""
        ...

    async def update(self, vendedor_id: str, row: dict[str, Any]) -> QueryResult:
        """Atualiza o vendedor com o id informado."""
        ...

    async def delete(self, vendedor_id: str) -> QueryResult:
        """Remove o vendedor com o id informado."""
        ...
