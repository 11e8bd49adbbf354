"""Fuente: resumen de inventario por producto (stock + lotes)."""

from __future__ import annotations

from adapters.inventory_sources.base import SummarySource
from core.domain.models import InventoryProductSummary


class InventorySource(SummarySource[InventoryProductSummary]):
    item_model = InventoryProductSummary
    sync_path = "/api/inventory/sync"
    summary_path = "/api/inventory/summary"
