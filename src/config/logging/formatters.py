"""Formatter JSON com o conjunto fixo de campos do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter padrão.

    Exemplo de saída:
        {"asctime": "...", "level": "INFO", "logger": "app.coordinators...",
         "message": "vendedores_fetch_ok", "correlation_id": "abc-123",
         "service": "painel_vendedores", "total_count": 25}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
