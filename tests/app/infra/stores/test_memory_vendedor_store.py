"""Testes do gateway de vendedores em memória."""

from __future__ import annotations

import pytest

from app.infra.stores.memory_clipboard import MemoryClipboard
from app.infra.stores.memory_vendedor_store import MemoryVendedorGateway
from tests.fakes.fake_vendedor_gateway import make_vendedores


class TestMemoryVendedorGateway:
    """Mesma semântica de filtro/range/contagem do backend."""

    @pytest.mark.asyncio
    async def test_search_range_and_count(self) -> None:
        gateway = MemoryVendedorGateway(make_vendedores(12))

        result = await gateway.search("", 10, 10)

        assert result.count == 12
        assert [v.id for v in result.data or []] == ["11", "12"]

    @pytest.mark.asyncio
    async def test_search_filters_by_nome_ignoring_case(self) -> None:
        gateway = MemoryVendedorGateway(make_vendedores(3, prefix="Loja"))

        result = await gateway.search("loja 0", 0, 10)
        nothing = await gateway.search("mercado", 0, 10)

        assert result.count == 3
        assert nothing.count == 0
        assert nothing.data == []

    @pytest.mark.asyncio
    async def test_insert_assigns_id(self) -> None:
        gateway = MemoryVendedorGateway()

        result = await gateway.insert({"nome": "Ana", "email": "a@x.com", "status_integracao": None})

        assert result.ok
        assert result.data is not None and result.data[0].id
        assert gateway.count() == 1

    @pytest.mark.asyncio
    async def test_update_and_delete(self) -> None:
        gateway = MemoryVendedorGateway(make_vendedores(2))

        updated = await gateway.update("1", {"status_integracao": "ativo"})
        deleted = await gateway.delete("2")
        missing = await gateway.delete("2")

        assert updated.data is not None and updated.data[0].status_integracao == "ativo"
        assert deleted.count == 1
        assert missing.ok and missing.data == []
        assert gateway.count() == 1


@pytest.mark.asyncio
async def test_memory_clipboard_keeps_history() -> None:
    clipboard = MemoryClipboard()

    await clipboard.write_text("a")
    await clipboard.write_text("b")

    assert clipboard.last_text == "b"
    assert clipboard.history == ["a", "b"]
