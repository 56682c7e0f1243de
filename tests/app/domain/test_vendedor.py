"""Testes do modelo Vendedor."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.domain.vendedor import Vendedor, VendedorInput


def test_from_row_keeps_wire_names() -> None:
    row = {"id": "7", "nome": "Ana", "email": "ana@x.com", "status_integracao": None}

    vendedor = Vendedor.from_row(row)

    assert vendedor.model_dump() == row


def test_numeric_id_becomes_string() -> None:
    vendedor = Vendedor.from_row({"id": 42, "nome": "Ana", "email": "a@x.com"})
    assert vendedor.id == "42"


def test_missing_id_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Vendedor.from_row({"id": None, "nome": "Ana", "email": "a@x.com"})


@pytest.mark.parametrize(
    ("status", "expected"),
    [(None, "pendente"), ("", "pendente"), ("ativo", "ativo"), ("suspenso", "suspenso")],
)
def test_display_status(status: str | None, expected: str) -> None:
    vendedor = Vendedor(id="1", nome="Ana", email="a@x.com", status_integracao=status)
    assert vendedor.display_status == expected


def test_input_sends_empty_status_as_null() -> None:
    payload = VendedorInput(nome="Ana", email="ana@x.com", status_integracao="")
    assert payload.to_row() == {"nome": "Ana", "email": "ana@x.com", "status_integracao": None}
