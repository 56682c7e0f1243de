"""Exceções do painel de vendedores."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (rede, backend)."""


class BackendQueryError(InfrastructureError):
    """Falha de uma chamada ao backend de dados (busca, insert, update, delete).

    Não diferencia erro de validação, conflito ou transporte: qualquer
    falha invalida a chamada inteira.
    """

    def __init__(self, code: str, status_code: int | None = None) -> None:
        super().__init__(code)
        self.code = code
        self.status_code = status_code


class PanelError(Exception):
    """Base para erros de uso do painel."""


class FormValidationError(PanelError):
    """Campo obrigatório ausente ou inválido no formulário."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class PendingDeleteError(PanelError):
    """Já existe uma remoção aguardando confirmação."""


class ReadOnlyPanelError(PanelError):
    """Operação de escrita em painel somente leitura."""
