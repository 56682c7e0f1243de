"""Stores: implementações em memória para desenvolvimento/testes."""

from __future__ import annotations

from app.infra.stores.memory_clipboard import MemoryClipboard
from app.infra.stores.memory_vendedor_store import MemoryVendedorGateway

__all__ = [
    "MemoryClipboard",
    "MemoryVendedorGateway",
]
