"""correlation_id por requisição, propagado aos logs via ContextVar.

O middleware HTTP define o valor a partir de `x-correlation-id` (ou gera
um novo) e o `CorrelationIdFilter` o lê em cada log.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; sem valor, gera um UUID v4.

    Returns:
        Token para `reset_correlation_id`.
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
