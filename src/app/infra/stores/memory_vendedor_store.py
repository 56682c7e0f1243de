"""Gateway de vendedores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.

Reproduz a semântica do backend: filtro `ilike` em `nome`, ordem de
inserção, contagem exata e range inclusivo.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from app.domain.vendedor import Vendedor
from app.protocols.vendedor_gateway import QueryResult, VendedorGatewayProtocol

logger = logging.getLogger(__name__)


class MemoryVendedorGateway(VendedorGatewayProtocol):
    """Tabela `vendedores` em um dict ordenado."""

    def __init__(self, seed: list[Vendedor] | None = None) -> None:
        self._rows: dict[str, Vendedor] = {}
        for vendedor in seed or []:
            self._rows[vendedor.id] = vendedor

    def _matching(self, term: str) -> list[Vendedor]:
        if not term:
            return list(self._rows.values())
        needle = term.casefold()
        return [v for v in self._rows.values() if needle in v.nome.casefold()]

    async def search(self, term: str, offset: int, limit: int) -> QueryResult:
        matching = self._matching(term)
        return QueryResult(data=matching[offset : offset + limit], count=len(matching))

    async def insert(self, row: dict[str, Any]) -> QueryResult:
        vendedor = Vendedor.from_row({"id": str(uuid.uuid4()), **row})
        self._rows[vendedor.id] = vendedor
        logger.debug("memory_vendedor_inserted", extra={"vendedor_id": vendedor.id})
        return QueryResult(data=[vendedor], count=1)

    async def update(self, vendedor_id: str, row: dict[str, Any]) -> QueryResult:
        current = self._rows.get(vendedor_id)
        if current is None:
            # PostgREST devolve lista vazia quando o filtro não casa
            return QueryResult(data=[], count=0)
        updated = current.model_copy(update=row)
        self._rows[vendedor_id] = updated
        return QueryResult(data=[updated], count=1)

    async def delete(self, vendedor_id: str) -> QueryResult:
        removed = self._rows.pop(vendedor_id, None)
        if removed is None:
            return QueryResult(data=[], count=0)
        return QueryResult(data=[removed], count=1)

    async def ping(self) -> bool:
        return True

    def count(self) -> int:
        """Quantidade total de linhas (apenas para testes)."""
        return len(self._rows)
