"""End-to-end: fuentes HTTP + agregador sobre un backend simulado."""

from __future__ import annotations

import httpx
import pytest

from conftest import page_body
from core.services.collections import (
    fetch_all_grn_summaries,
    fetch_all_inventory_summaries,
    fetch_all_purchase_order_summaries,
    fetch_all_suppliers,
)


class _Backend:
    """Serves `rows` page by page on every `/summary` and `/sync` path."""

    def __init__(
        self,
        rows: list[dict],
        *,
        total: int | None = None,
        empty_pages: set[int] | None = None,
        fail_on: int | None = None,
    ) -> None:
        self.rows = rows
        self.total = len(rows) if total is None else total
        self.empty_pages = empty_pages or set()
        self.fail_on = fail_on
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page_num = int(request.url.params["pageNum"])
        page_size = int(request.url.params["pageSize"])
        if page_num == self.fail_on:
            return httpx.Response(503, json={"code": "UNAVAILABLE", "message": "try later"})
        if page_num in self.empty_pages:
            data: list[dict] = []
        else:
            start = (page_num - 1) * page_size
            data = self.rows[start : start + page_size]
        return httpx.Response(
            200,
            json=page_body(page_num=page_num, page_size=page_size, total=self.total, data=data),
        )

    def paths(self) -> list[tuple[str, str, str]]:
        return [(r.method, r.url.path, r.url.params["pageNum"]) for r in self.requests]


@pytest.mark.asyncio
async def test_grn_summaries_250_rows_in_three_pages(settings, make_client) -> None:
    backend = _Backend([{"grnId": i, "supplierName": f"S{i}"} for i in range(250)])
    async with make_client(backend) as client:
        result = await fetch_all_grn_summaries(settings=settings, client=client)

    assert [grn.grn_id for grn in result.items] == list(range(250))
    assert result.synced is False
    assert backend.paths() == [
        ("GET", "/api/grns/summary", "1"),
        ("GET", "/api/grns/summary", "2"),
        ("GET", "/api/grns/summary", "3"),
    ]


@pytest.mark.asyncio
async def test_sync_first_posts_once_then_walks_from_page_one(settings, make_client) -> None:
    backend = _Backend([{"poId": i} for i in range(120)])
    async with make_client(backend) as client:
        result = await fetch_all_purchase_order_summaries(settings=settings, client=client, sync_first=True)

    assert result.synced is True
    assert len(result.items) == 120
    assert backend.paths() == [
        ("POST", "/api/pos/sync", "1"),
        ("GET", "/api/pos/summary", "1"),
        ("GET", "/api/pos/summary", "2"),
    ]


@pytest.mark.asyncio
async def test_inconsistent_total_stops_on_empty_page(settings, make_client) -> None:
    backend = _Backend([{"productId": i} for i in range(250)], empty_pages={2})
    async with make_client(backend) as client:
        result = await fetch_all_inventory_summaries(settings=settings, client=client)

    assert len(result.items) == 100
    assert len(backend.requests) == 2


@pytest.mark.asyncio
async def test_failed_page_raises_and_returns_nothing(settings, make_client) -> None:
    backend = _Backend([{"productId": i} for i in range(300)], fail_on=2)
    async with make_client(backend) as client:
        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            await fetch_all_inventory_summaries(settings=settings, client=client)

    assert excinfo.value.response.status_code == 503
    assert len(backend.requests) == 2


@pytest.mark.asyncio
async def test_suppliers_forward_query_on_every_page(settings, make_client) -> None:
    backend = _Backend([{"id": str(i), "name": f"Acme {i}"} for i in range(150)])
    async with make_client(backend) as client:
        result = await fetch_all_suppliers(settings=settings, client=client, query="acme")

    assert len(result.items) == 150
    assert [r.url.params["q"] for r in backend.requests] == ["acme", "acme"]


@pytest.mark.asyncio
async def test_page_size_comes_from_settings(settings, make_client) -> None:
    settings.page_size = 40
    backend = _Backend([{"grnId": i} for i in range(100)])
    async with make_client(backend) as client:
        result = await fetch_all_grn_summaries(settings=settings, client=client)

    assert len(result.items) == 100
    assert [r.url.params["pageSize"] for r in backend.requests] == ["40", "40", "40"]
