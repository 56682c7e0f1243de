"""Validação do formulário de vendedor antes de qualquer chamada de rede."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from app.domain.vendedor import VendedorInput
from utils.errors import FormValidationError

if TYPE_CHECKING:
    from app.coordinators.vendedores.models import FormBuffer

_EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_form(buffer: FormBuffer) -> VendedorInput:
    """Converte o buffer em `VendedorInput`.

    Nome e e-mail são obrigatórios (espaços nas pontas são descartados);
    o e-mail precisa ter formato usuario@dominio.tld.

    Raises:
        FormValidationError: No primeiro campo inválido.
    """
    nome = buffer.nome.strip()
    email = buffer.email.strip()

    if not nome:
        raise FormValidationError("nome", "required")
    if not email:
        raise FormValidationError("email", "required")
    if not _EMAIL_REGEX.match(email):
        raise FormValidationError("email", "invalid_format")

    return VendedorInput(
        nome=nome,
        email=email,
        status_integracao=buffer.status_integracao.strip() or None,
    )
