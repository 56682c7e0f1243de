"""Settings de conexão com o Supabase (PostgREST).

Sem SUPABASE_URL/SUPABASE_ANON_KEY o serviço sobe com valores
placeholder: o painel fica sem dados, mas o processo não falha.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

PLACEHOLDER_URL = "SUA_SUPABASE_URL"
PLACEHOLDER_ANON_KEY = "SUA_SUPABASE_ANON_KEY"


@dataclass(frozen=True)
class SupabaseSettings:
    """Configurações do backend hospedado.

    Attributes:
        url: URL do projeto (ex: https://xyz.supabase.co)
        anon_key: Chave anon usada em `apikey` e `Authorization`
        table: Tabela de vendedores
        request_timeout_seconds: Timeout por requisição HTTP
    """

    url: str = PLACEHOLDER_URL
    anon_key: str = PLACEHOLDER_ANON_KEY
    table: str = "vendedores"
    request_timeout_seconds: float = 10.0

    @property
    def is_placeholder(self) -> bool:
        """True quando alguma credencial não foi configurada."""
        return self.url == PLACEHOLDER_URL or self.anon_key == PLACEHOLDER_ANON_KEY

    @property
    def rest_url(self) -> str:
        """Endpoint REST da tabela de vendedores."""
        return f"{self.url.rstrip('/')}/rest/v1/{self.table}"

    def validate(self) -> list[str]:
        """Valida configurações do Supabase.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.url == PLACEHOLDER_URL:
            errors.append("SUPABASE_URL não configurado (usando placeholder)")
        elif not self.url.startswith(("http://", "https://")):
            errors.append("SUPABASE_URL deve começar com http:// ou https://")

        if self.anon_key == PLACEHOLDER_ANON_KEY:
            errors.append("SUPABASE_ANON_KEY não configurado (usando placeholder)")

        if not self.table:
            errors.append("SUPABASE_TABLE não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("SUPABASE_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_supabase_from_env() -> SupabaseSettings:
    return SupabaseSettings(
        url=os.getenv("SUPABASE_URL") or PLACEHOLDER_URL,
        anon_key=os.getenv("SUPABASE_ANON_KEY") or PLACEHOLDER_ANON_KEY,
        table=os.getenv("SUPABASE_TABLE", "vendedores"),
        request_timeout_seconds=float(os.getenv("SUPABASE_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_supabase_settings() -> SupabaseSettings:
    """Retorna instância cacheada de SupabaseSettings."""
    return _load_supabase_from_env()
