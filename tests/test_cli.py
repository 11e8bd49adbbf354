"""Tests de la CLI (Typer) con los servicios sustituidos."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from typer.testing import CliRunner

import cli.doctor as cli_doctor
import cli.main as cli_main
from adapters.http_client import build_async_client
from core.domain.models import GrnSummary, Supplier
from core.services.collections import CollectionResult

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("RETAIL_ADMIN_API_BASE_URL", "http://backend.test")


def _serve(
    monkeypatch: pytest.MonkeyPatch,
    module: object,
    handler: Callable[[httpx.Request], httpx.Response],
) -> None:
    """Route every client built by `module` through a mock transport."""

    def _build(settings=None, **kwargs):
        return build_async_client(settings, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(module, "build_async_client", _build)


def test_grns_prints_table_and_exports(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    seen: dict[str, object] = {}

    async def fake_fetch(*, settings, client, sync_first):
        seen["sync_first"] = sync_first
        return CollectionResult(items=[GrnSummary(grn_id=1, supplier_name="Acme")], synced=sync_first)

    monkeypatch.setattr(cli_main, "fetch_all_grn_summaries", fake_fetch)
    out = tmp_path / "grns.json"

    result = runner.invoke(cli_main.app, ["grns", "--sync", "--json", str(out)])

    assert result.exit_code == 0, result.output
    assert seen["sync_first"] is True
    assert "Acme" in result.output
    assert "sync requested" in result.output
    assert out.exists()


def test_suppliers_passes_query(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    async def fake_fetch(*, settings, client, query):
        seen["query"] = query
        return CollectionResult(items=[Supplier(id="s-1", name="Acme Foods")])

    monkeypatch.setattr(cli_main, "fetch_all_suppliers", fake_fetch)

    result = runner.invoke(cli_main.app, ["suppliers", "-q", "acme"])

    assert result.exit_code == 0, result.output
    assert seen["query"] == "acme"


def test_unauthorized_exits_with_hint(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_fetch(*, settings, client, sync_first):
        request = httpx.Request("GET", "http://backend.test/api/inventory/summary")
        response = httpx.Response(401, request=request)
        raise httpx.HTTPStatusError("unauthorized", request=request, response=response)

    monkeypatch.setattr(cli_main, "fetch_all_inventory_summaries", fake_fetch)

    result = runner.invoke(cli_main.app, ["inventory"])

    assert result.exit_code == 1
    assert "Unauthorized" in result.output


def test_network_failure_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_fetch(*, settings, client, sync_first):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(cli_main, "fetch_all_purchase_order_summaries", fake_fetch)

    result = runner.invoke(cli_main.app, ["pos"])

    assert result.exit_code == 1
    assert "connection refused" in result.output


def test_lots_forwards_repeated_filters(monkeypatch: pytest.MonkeyPatch) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={"code": "SUCCESS", "data": [{"lotCode": "L-77", "productName": "Milk", "unitPrice": 1.5}]},
        )

    _serve(monkeypatch, cli_main, handler)

    result = runner.invoke(
        cli_main.app,
        ["lots", "-q", "milk", "--category", "11", "--category", "12", "--supplier", "3", "--limit", "5"],
    )

    assert result.exit_code == 0, result.output
    assert "L-77" in result.output
    params = requests[0].url.params
    assert requests[0].url.path == "/api/sales-orders/available-items"
    assert params["query"] == "milk"
    assert params.get_list("categoryIds") == ["11", "12"]
    assert params.get_list("supplierIds") == ["3"]
    assert "parentCategoryIds" not in params
    assert params["limit"] == "5"


def test_login_stores_token_in_user_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        data = {"accessToken": "tok-new", "tokenType": "Bearer", "user": {"username": "admin", "fullName": "Admin"}}
        return httpx.Response(200, json={"code": "SUCCESS", "data": data})

    _serve(monkeypatch, cli_main, handler)

    result = runner.invoke(cli_main.app, ["login", "admin"], input="s3cret\n")

    assert result.exit_code == 0, result.output
    assert "Logged in as Admin" in result.output
    assert requests[0].url.path == "/api/auth/login"
    env_text = (tmp_path / "xdg" / "retail-admin" / ".env").read_text(encoding="utf-8")
    assert "RETAIL_ADMIN_API_TOKEN=tok-new" in env_text.splitlines()
    assert "RETAIL_ADMIN_TOKEN_TYPE=Bearer" in env_text.splitlines()


def test_login_without_token_exits_with_details(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    _serve(monkeypatch, cli_main, lambda request: httpx.Response(200, json={"code": "SUCCESS", "data": {}}))

    result = runner.invoke(cli_main.app, ["login", "admin"], input="s3cret\n")

    assert result.exit_code == 1
    assert "Unexpected response" in result.output
    assert "accessToken" in result.output
    assert not (tmp_path / "xdg" / "retail-admin" / ".env").exists()


def test_doctor_run_reports_connectivity(monkeypatch: pytest.MonkeyPatch) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"code": "SUCCESS", "pageNum": 1, "pageSize": 1, "total": 0, "data": []})

    _serve(monkeypatch, cli_doctor, handler)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "API connectivity" in result.output
    assert "HTTP 200" in result.output
    assert requests[0].url.path == "/api/suppliers"
    assert requests[0].url.params["pageSize"] == "1"


def test_doctor_run_flags_unauthorized(monkeypatch: pytest.MonkeyPatch) -> None:
    _serve(monkeypatch, cli_doctor, lambda request: httpx.Response(401))

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "FAIL" in result.output


def test_doctor_setup_api_writes_user_env(tmp_path) -> None:
    result = runner.invoke(cli_main.app, ["doctor", "setup-api"], input="http://api.shop.test\n250\n")

    assert result.exit_code == 0, result.output
    lines = (tmp_path / "xdg" / "retail-admin" / ".env").read_text(encoding="utf-8").splitlines()
    assert "RETAIL_ADMIN_API_BASE_URL=http://api.shop.test" in lines
    assert "RETAIL_ADMIN_PAGE_SIZE=250" in lines
