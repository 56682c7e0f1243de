"""Cliente HTTP assíncrono compartilhado pelos gateways externos.

Sem política de retry: uma falha de transporte ou status >= 400 vira
`HttpError` e quem chama decide o que fazer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class HttpClient:
    """Wrapper fino sobre `httpx.AsyncClient` com headers padrão.

    Args:
        config: Timeout, headers padrão e verificação TLS.
        transport: Transport alternativo (ex: `httpx.MockTransport` em testes).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.AsyncClient(
            headers=self._config.default_headers,
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
            transport=transport,
        )

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e levanta `HttpError` em falha."""
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise HttpError("http_connection_error") from exc

        if response.status_code >= 400:
            logger.warning(
                "http_error_status",
                extra={"method": method, "status_code": response.status_code},
            )
            raise HttpError(
                f"http_{response.status_code}",
                status_code=response.status_code,
                response=response,
            )
        return response

    async def aclose(self) -> None:
        await self._client.aclose()
