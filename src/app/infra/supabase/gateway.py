"""Gateway de vendedores sobre a API REST do Supabase (PostgREST).

Traduz as operações do `VendedorGatewayProtocol` em chamadas HTTP:
- busca: GET com filtro `ilike`, header `Range` e `Prefer: count=exact`
- insert: POST
- update: PATCH `?id=eq.<id>`
- delete: DELETE `?id=eq.<id>`

Toda falha vira `QueryResult.error`; nada é levantado para os coordinators.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.vendedor import VENDEDOR_COLUMNS, Vendedor
from app.infra.http import HttpError
from app.infra.supabase.postgrest_errors import (
    RANGE_NOT_SATISFIABLE,
    parse_content_range_total,
    parse_postgrest_error,
)
from app.observability import record_latency
from app.protocols.vendedor_gateway import QueryResult
from utils.errors import BackendQueryError

if TYPE_CHECKING:
    import httpx

    from app.infra.http import HttpClient
    from config.settings import SupabaseSettings

logger = logging.getLogger(__name__)

_SELECT = ",".join(VENDEDOR_COLUMNS)


class SupabaseVendedorGateway:
    """Implementação PostgREST do gateway de vendedores.

    Args:
        settings: URL, chave anon, tabela e timeout.
        http_client: Cliente HTTP com os headers de auth
            (ver `app.bootstrap.clients.create_supabase_http_client`).
    """

    def __init__(
        self,
        settings: SupabaseSettings,
        http_client: HttpClient,
    ) -> None:
        self._settings = settings
        self._url = settings.rest_url
        self._http = http_client

    async def search(self, term: str, offset: int, limit: int) -> QueryResult:
        params = {"select": _SELECT}
        if term:
            params["nome"] = f"ilike.%{term}%"
        headers = {
            "Prefer": "count=exact",
            "Range-Unit": "items",
            "Range": f"{offset}-{offset + limit - 1}",
        }
        try:
            response = await self._call("search", "GET", params=params, headers=headers)
            records = _parse_rows(response)
        except _PostgrestCallError as exc:
            if exc.status_code == RANGE_NOT_SATISFIABLE and exc.total is not None:
                # Página além do fim: lista vazia com o total real
                return QueryResult(data=[], count=exc.total)
            return QueryResult.failure(exc.code, exc.status_code)
        except BackendQueryError as exc:
            return QueryResult.failure(exc.code)

        total = parse_content_range_total(response.headers.get("content-range"))
        return QueryResult(data=records, count=total if total is not None else len(records))

    async def insert(self, row: dict[str, Any]) -> QueryResult:
        return await self._write(
            "insert",
            "POST",
            params={"select": _SELECT},
            json=row,
        )

    async def update(self, vendedor_id: str, row: dict[str, Any]) -> QueryResult:
        return await self._write(
            "update",
            "PATCH",
            params={"id": f"eq.{vendedor_id}", "select": _SELECT},
            json=row,
        )

    async def delete(self, vendedor_id: str) -> QueryResult:
        return await self._write(
            "delete",
            "DELETE",
            params={"id": f"eq.{vendedor_id}", "select": _SELECT},
        )

    async def ping(self) -> bool:
        """Verifica se o backend responde (usado no readiness)."""
        result = await self.search("", 0, 1)
        return result.ok

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _write(
        self,
        operation: str,
        method: str,
        *,
        params: dict[str, str],
        json: Any = None,
    ) -> QueryResult:
        headers = {"Prefer": "return=representation"}
        try:
            response = await self._call(
                operation, method, params=params, json=json, headers=headers
            )
            records = _parse_rows(response)
        except BackendQueryError as exc:
            return QueryResult.failure(exc.code, exc.status_code)
        return QueryResult(data=records, count=len(records))

    async def _call(
        self,
        operation: str,
        method: str,
        *,
        params: dict[str, str],
        headers: dict[str, str],
        json: Any = None,
    ) -> httpx.Response:
        started_at = time.perf_counter()
        try:
            return await self._http.request(
                method, self._url, params=params, json=json, headers=headers
            )
        except HttpError as exc:
            raise _to_backend_error(operation, exc) from exc
        finally:
            latency_ms = (time.perf_counter() - started_at) * 1000
            record_latency("supabase_gateway", operation, latency_ms)


class _PostgrestCallError(BackendQueryError):
    """Falha de chamada com o total do `Content-Range` (presente em 416)."""

    def __init__(self, code: str, status_code: int | None, total: int | None) -> None:
        super().__init__(code, status_code)
        self.total = total


def _to_backend_error(operation: str, exc: HttpError) -> _PostgrestCallError:
    if exc.response is None:
        logger.warning(
            "supabase_request_failed",
            extra={"operation": operation, "error": str(exc)},
        )
        return _PostgrestCallError(str(exc), None, None)

    api_error = parse_postgrest_error(exc.response)
    total = parse_content_range_total(exc.response.headers.get("content-range"))
    logger.warning(
        "supabase_request_failed",
        extra={
            "operation": operation,
            "status_code": api_error.status_code,
            "error_code": api_error.code,
        },
    )
    return _PostgrestCallError(api_error.code, api_error.status_code, total)


def _parse_rows(response: httpx.Response) -> list[Vendedor]:
    if not response.content:
        return []
    try:
        payload = response.json()
    except ValueError as exc:
        raise BackendQueryError("invalid_json") from exc
    if not isinstance(payload, list):
        raise BackendQueryError("unexpected_payload")
    try:
        return [Vendedor.from_row(row) for row in payload]
    except ValidationError as exc:
        raise BackendQueryError("invalid_row") from exc


def build_auth_headers(anon_key: str) -> dict[str, str]:
    """Headers de autenticação exigidos pelo Supabase."""
    return {
        "apikey": anon_key,
        "Authorization": f"Bearer {anon_key}",
        "Accept": "application/json",
    }
