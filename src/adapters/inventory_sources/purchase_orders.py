"""Fuente: resúmenes de órdenes de compra."""

from __future__ import annotations

from adapters.inventory_sources.base import SummarySource
from core.domain.models import PurchaseOrderSummary


class PurchaseOrderSource(SummarySource[PurchaseOrderSummary]):
    item_model = PurchaseOrderSummary
    sync_path = "/api/pos/sync"
    summary_path = "/api/pos/summary"
