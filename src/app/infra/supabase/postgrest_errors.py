"""Erros e helpers de parsing para respostas PostgREST."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

_CONTENT_RANGE_REGEX = re.compile(r"^(?:\d+-\d+|\*)/(\d+|\*)$")

# PostgREST responde 416 quando o range pedido passa do total de linhas
RANGE_NOT_SATISFIABLE = 416


@dataclass(frozen=True)
class PostgrestApiError:
    """Erro retornado pelo PostgREST (corpo JSON)."""

    code: str
    message: str
    status_code: int


def parse_postgrest_error(response: httpx.Response) -> PostgrestApiError:
    """Extrai código/mensagem de erro do corpo da resposta.

    Corpos fora do formato esperado viram erro genérico `http_<status>`.
    """
    payload: Any
    try:
        payload = response.json()
    except (json.JSONDecodeError, ValueError):
        payload = None

    if isinstance(payload, dict) and payload.get("code"):
        return PostgrestApiError(
            code=str(payload["code"]),
            message=str(payload.get("message", "")),
            status_code=response.status_code,
        )
    return PostgrestApiError(
        code=f"http_{response.status_code}",
        message="",
        status_code=response.status_code,
    )


def parse_content_range_total(header: str | None) -> int | None:
    """Total de linhas informado em `Content-Range` (ex: "0-9/25", "*/0").

    Returns:
        Total, ou None quando ausente, malformado ou desconhecido ("*").
    """
    if not header:
        return None
    match = _CONTENT_RANGE_REGEX.match(header.strip())
    if match is None or match.group(1) == "*":
        return None
    return int(match.group(1))
