"""Collection orchestration utilities.

Binds each REST source to the generic aggregator so that callers (CLI, batch
jobs, tests) get one `fetch_all_*` entry-point per collection. The optional
`sync` step is always a separate, explicit call: the aggregator itself only
reads the listing endpoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from adapters.inventory_sources import (
    GrnSource,
    InventorySource,
    PurchaseOrderSource,
    SupplierSource,
)
from core.config import AppSettings
from core.domain.models import (
    GrnSummary,
    InventoryProductSummary,
    PurchaseOrderSummary,
    Supplier,
)
from core.interfaces.pagination import CollectionSynchronizer, PageFetcher
from core.services.aggregator import PaginatedAggregator

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class CollectionResult(Generic[T]):
    """Output of a collection walk."""

    items: list[T]
    synced: bool = False


async def refresh_and_fetch_all(
    *,
    fetcher: PageFetcher[T],
    page_size: int,
    label: str,
    synchronizer: CollectionSynchronizer[T] | None = None,
    sync_first: bool = False,
    filter: Any = None,
) -> CollectionResult[T]:
    """Optionally refresh the source of truth, then aggregate every page.

    The page returned by `sync` is not reused; the walk always restarts at
    page 1 of the listing endpoint.
    """

    synced = False
    if sync_first:
        if synchronizer is None:
            raise ValueError(f"{label} has no sync endpoint")
        logger.info("%s: requesting server-side sync", label)
        await synchronizer.sync(1, page_size)
        synced = True

    aggregator: PaginatedAggregator[T] = PaginatedAggregator(fetcher, page_size=page_size, label=label)
    items = await aggregator.fetch_all(filter)
    return CollectionResult(items=items, synced=synced)


async def fetch_all_grn_summaries(
    *,
    settings: AppSettings,
    client: httpx.AsyncClient | None = None,
    sync_first: bool = False,
) -> CollectionResult[GrnSummary]:
    source = GrnSource(settings, client=client)
    return await refresh_and_fetch_all(
        fetcher=source.list_page,
        synchronizer=source,
        sync_first=sync_first,
        page_size=settings.page_size,
        label="grns",
    )


async def fetch_all_purchase_order_summaries(
    *,
    settings: AppSettings,
    client: httpx.AsyncClient | None = None,
    sync_first: bool = False,
) -> CollectionResult[PurchaseOrderSummary]:
    source = PurchaseOrderSource(settings, client=client)
    return await refresh_and_fetch_all(
        fetcher=source.list_page,
        synchronizer=source,
        sync_first=sync_first,
        page_size=settings.page_size,
        label="purchase-orders",
    )


async def fetch_all_inventory_summaries(
    *,
    settings: AppSettings,
    client: httpx.AsyncClient | None = None,
    sync_first: bool = False,
) -> CollectionResult[InventoryProductSummary]:
    source = InventorySource(settings, client=client)
    return await refresh_and_fetch_all(
        fetcher=source.list_page,
        synchronizer=source,
        sync_first=sync_first,
        page_size=settings.page_size,
        label="inventory",
    )


async def fetch_all_suppliers(
    *,
    settings: AppSettings,
    client: httpx.AsyncClient | None = None,
    query: str | None = None,
) -> CollectionResult[Supplier]:
    source = SupplierSource(settings, client=client)
    return await refresh_and_fetch_all(
        fetcher=source.list_page,
        page_size=settings.page_size,
        label="suppliers",
        filter=query,
    )
