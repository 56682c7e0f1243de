"""Área de transferência em memória.

O servidor não tem acesso ao clipboard do navegador: guardamos o último
texto "copiado" para que a view o entregue ao cliente.
"""

from __future__ import annotations


class MemoryClipboard:
    """ClipboardProtocol que registra os textos escritos."""

    def __init__(self) -> None:
        self._history: list[str] = []

    async def write_text(self, text: str) -> None:
        self._history.append(text)

    @property
    def last_text(self) -> str | None:
        return self._history[-1] if self._history else None

    @property
    def history(self) -> list[str]:
        return list(self._history)
