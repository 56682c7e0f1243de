"""Protocolo para a área de transferência."""

from __future__ import annotations

from typing import Protocol


class ClipboardProtocol(Protocol):
    """Escrita de texto na área de transferência (fire-and-forget)."""

    async def write_text(self, text: str) -> None: ...
