"""Testes HTTP das rotas do painel de vendedores."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.coordinators.vendedores import VendedorPanel
from app.infra.stores import MemoryClipboard
from config.settings import PanelSettings
from tests.fakes.fake_vendedor_gateway import FakeVendedorGateway, make_vendedores

BASE = "/vendedores/panel"


@pytest.fixture
def gateway() -> FakeVendedorGateway:
    return FakeVendedorGateway(make_vendedores(25))


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


def _client(panel: VendedorPanel) -> Iterator[TestClient]:
    with TestClient(create_app(panel=panel)) as client:
        yield client


@pytest.fixture
def client(gateway: FakeVendedorGateway, clipboard: MemoryClipboard) -> Iterator[TestClient]:
    yield from _client(VendedorPanel(gateway, clipboard, PanelSettings()))


@pytest.fixture
def read_only_client(gateway: FakeVendedorGateway) -> Iterator[TestClient]:
    yield from _client(VendedorPanel(gateway, MemoryClipboard(), PanelSettings(can_edit=False)))


class TestListing:
    def test_startup_loads_first_page(self, client: TestClient) -> None:
        body = client.get(BASE).json()

        assert body["total_count"] == 25
        assert len(body["rows"]) == 10
        assert body["pagination"]["total_pages"] == 3
        assert body["is_loading"] is False

    def test_search_resets_to_first_page(
        self, client: TestClient, gateway: FakeVendedorGateway
    ) -> None:
        client.put(f"{BASE}/page", json={"page_number": 3})

        body = client.put(f"{BASE}/search", json={"term": "Vendedor 1"}).json()

        assert body["pagination"]["page_number"] == 1
        assert body["search_term"] == "Vendedor 1"
        assert gateway.calls_for("search")[-1] == ("search", "Vendedor 1", 0, 10)

    def test_next_and_previous(self, client: TestClient) -> None:
        assert client.post(f"{BASE}/page/next").json()["pagination"]["page_number"] == 2
        assert client.post(f"{BASE}/page/previous").json()["pagination"]["page_number"] == 1

    def test_page_below_one_is_rejected(self, client: TestClient) -> None:
        assert client.put(f"{BASE}/page", json={"page_number": 0}).status_code == 422

    def test_backend_failure_keeps_rows(
        self, client: TestClient, gateway: FakeVendedorGateway
    ) -> None:
        gateway.fail("search")

        body = client.post(f"{BASE}/refresh").json()

        assert len(body["rows"]) == 10
        assert body["last_error"] == "http_500"


class TestForm:
    def test_create_flow(self, client: TestClient, gateway: FakeVendedorGateway) -> None:
        client.post(f"{BASE}/form", json={})
        client.patch(f"{BASE}/form", json={"field": "nome", "value": "Ana"})
        client.patch(f"{BASE}/form", json={"field": "email", "value": "ana@x.com"})

        body = client.post(f"{BASE}/form/submit").json()

        assert body["success"] is True
        assert body["panel"]["form"]["is_open"] is False
        assert body["panel"]["total_count"] == 26
        assert gateway.calls_for("insert")[0][1]["status_integracao"] is None

    def test_validation_error_is_reported(self, client: TestClient) -> None:
        client.post(f"{BASE}/form", json={})

        body = client.post(f"{BASE}/form/submit").json()

        assert body["success"] is False
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["error_field"] == "nome"
        assert body["panel"]["form"]["is_open"] is True

    def test_edit_unknown_id_is_404(self, client: TestClient) -> None:
        assert client.post(f"{BASE}/form", json={"vendedor_id": "999"}).status_code == 404

    def test_unknown_field_is_422(self, client: TestClient) -> None:
        client.post(f"{BASE}/form", json={})
        response = client.patch(f"{BASE}/form", json={"field": "id", "value": "1"})
        assert response.status_code == 422

    def test_field_update_on_closed_form_is_ignored(self, client: TestClient) -> None:
        body = client.patch(f"{BASE}/form", json={"field": "nome", "value": "Ana"}).json()

        assert body["form"]["is_open"] is False
        assert body["form"]["nome"] == ""

    def test_cancel_closes_form(self, client: TestClient) -> None:
        client.post(f"{BASE}/form", json={"vendedor_id": "2"})

        body = client.delete(f"{BASE}/form").json()

        assert body["form"]["is_open"] is False
        assert body["form"]["edit_target_id"] is None


class TestDelete:
    def test_request_confirm_flow(self, client: TestClient, gateway: FakeVendedorGateway) -> None:
        assert client.post(f"{BASE}/delete", json={"vendedor_id": "3"}).json()["delete"] == {
            "pending_id": "3",
            "is_deleting": False,
        }

        body = client.post(f"{BASE}/delete/confirm").json()

        assert body["deleted"] is True
        assert body["panel"]["total_count"] == 24
        assert gateway.calls_for("delete") == [("delete", "3")]

    def test_second_pending_is_conflict(self, client: TestClient) -> None:
        client.post(f"{BASE}/delete", json={"vendedor_id": "3"})
        assert client.post(f"{BASE}/delete", json={"vendedor_id": "4"}).status_code == 409

    def test_dismiss_makes_no_call(self, client: TestClient, gateway: FakeVendedorGateway) -> None:
        client.post(f"{BASE}/delete", json={"vendedor_id": "3"})

        body = client.delete(f"{BASE}/delete").json()

        assert body["delete"]["pending_id"] is None
        assert gateway.calls_for("delete") == []


class TestLinks:
    def test_generate_and_copy(self, client: TestClient, clipboard: MemoryClipboard) -> None:
        generated = client.post(f"{BASE}/links/7").json()
        copied = client.post(f"{BASE}/links/7/copy").json()

        expected = "https://www.mercadopago.com.br/authorization?user_id=7"
        assert generated["link"] == expected
        assert generated["copied"] is False
        assert copied["copied"] is True
        assert clipboard.last_text == expected
        row = next(r for r in copied["panel"]["rows"] if r["id"] == "7")
        assert row["generated_link"] == expected
        assert row["copied"] is True

    def test_copy_without_link(self, client: TestClient, clipboard: MemoryClipboard) -> None:
        body = client.post(f"{BASE}/links/7/copy").json()

        assert body["copied"] is False
        assert body["link"] is None
        assert clipboard.history == []

    def test_generate_for_unknown_id_is_404(self, client: TestClient) -> None:
        assert client.post(f"{BASE}/links/999").status_code == 404


class TestReadOnly:
    def test_mutations_are_forbidden(self, read_only_client: TestClient) -> None:
        assert read_only_client.post(f"{BASE}/form", json={}).status_code == 403
        assert read_only_client.post(f"{BASE}/form/submit").status_code == 403
        assert read_only_client.post(f"{BASE}/delete", json={"vendedor_id": "1"}).status_code == 403
        assert read_only_client.post(f"{BASE}/delete/confirm").status_code == 403

    def test_links_and_snapshot_still_work(self, read_only_client: TestClient) -> None:
        snapshot = read_only_client.get(BASE).json()

        assert snapshot["can_edit"] is False
        assert snapshot["form"] is None
        assert snapshot["delete"] is None
        assert read_only_client.post(f"{BASE}/links/1").status_code == 200


def test_panel_not_ready_is_503() -> None:
    """Sem lifespan o painel não é montado."""
    client = TestClient(create_app())
    assert client.get(BASE).status_code == 503
