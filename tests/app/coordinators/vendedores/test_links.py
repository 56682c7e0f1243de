"""Testes do link de onboarding e do indicador "copiado"."""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import pytest

from app.coordinators.vendedores.links import (
    COPY_FEEDBACK_SECONDS,
    OnboardingLinkBoard,
    build_onboarding_link,
)
from app.domain.vendedor import Vendedor
from app.infra.stores.memory_clipboard import MemoryClipboard


def _vendedor(vendedor_id: str) -> Vendedor:
    return Vendedor(id=vendedor_id, nome=f"V{vendedor_id}", email=f"{vendedor_id}@x.com")


def test_link_template_is_exact() -> None:
    assert (
        build_onboarding_link("7")
        == "https://www.mercadopago.com.br/authorization?user_id=7"
    )


def test_link_is_deterministic() -> None:
    assert build_onboarding_link("abc-123") == build_onboarding_link("abc-123")


def test_custom_base_url() -> None:
    link = build_onboarding_link("9", base_url="https://sandbox.example.com/authorization")
    assert link == "https://sandbox.example.com/authorization?user_id=9"


class TestOnboardingLinkBoard:
    def test_generate_stores_link_and_resets_copied(self) -> None:
        board = OnboardingLinkBoard(MemoryClipboard())

        link = board.generate(_vendedor("7"))

        assert board.link_for("7") == link
        assert board.copied == {"7": False}

    @pytest.mark.asyncio
    async def test_generate_for_one_id_keeps_others(self) -> None:
        board = OnboardingLinkBoard(MemoryClipboard(), feedback_seconds=5)
        board.generate(_vendedor("a"))
        await board.copy("a")
        links_before = board.generated_links

        board.generate(_vendedor("b"))
        board.generate(_vendedor("b"))

        assert board.link_for("a") == links_before["a"]
        assert board.is_copied("a") is True
        assert board.is_copied("b") is False
        board.close()

    @pytest.mark.asyncio
    async def test_copy_without_link_is_noop(self) -> None:
        clipboard = MemoryClipboard()
        board = OnboardingLinkBoard(clipboard)

        assert await board.copy("nao-gerado") is False
        assert clipboard.history == []
        assert board.copied == {}

    @pytest.mark.asyncio
    async def test_copy_writes_clipboard_and_sets_flag(self) -> None:
        clipboard = MemoryClipboard()
        board = OnboardingLinkBoard(clipboard)
        board.generate(_vendedor("7"))

        assert await board.copy("7") is True

        assert clipboard.last_text == "https://www.mercadopago.com.br/authorization?user_id=7"
        assert board.is_copied("7") is True
        board.close()

    @pytest.mark.asyncio
    async def test_copy_schedules_reset_after_two_seconds(self) -> None:
        board = OnboardingLinkBoard(MemoryClipboard())
        board.generate(_vendedor("7"))
        loop = asyncio.get_running_loop()

        with patch.object(loop, "call_later", wraps=loop.call_later) as call_later:
            await board.copy("7")

        assert COPY_FEEDBACK_SECONDS == 2.0
        call_later.assert_called_once()
        assert call_later.call_args.args[0] == 2.0
        board.close()

    @pytest.mark.asyncio
    async def test_copied_flag_expires(self) -> None:
        board = OnboardingLinkBoard(MemoryClipboard(), feedback_seconds=0.05)
        board.generate(_vendedor("7"))

        await board.copy("7")
        assert board.is_copied("7") is True

        await asyncio.sleep(0.15)
        assert board.is_copied("7") is False

    @pytest.mark.asyncio
    async def test_timers_are_independent_per_id(self) -> None:
        board = OnboardingLinkBoard(MemoryClipboard(), feedback_seconds=0.2)
        board.generate(_vendedor("a"))
        board.generate(_vendedor("b"))

        await board.copy("a")
        await asyncio.sleep(0.1)
        await board.copy("b")
        await asyncio.sleep(0.15)

        assert board.is_copied("a") is False
        assert board.is_copied("b") is True

        await asyncio.sleep(0.15)
        assert board.is_copied("b") is False

    @pytest.mark.asyncio
    async def test_regenerate_cancels_pending_reset(self) -> None:
        board = OnboardingLinkBoard(MemoryClipboard(), feedback_seconds=0.05)
        board.generate(_vendedor("7"))
        await board.copy("7")

        board.generate(_vendedor("7"))

        assert board.is_copied("7") is False
        await asyncio.sleep(0.1)
        assert board.is_copied("7") is False
