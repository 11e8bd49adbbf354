"""Fuente: notas de recepción de mercancía (GRN)."""

from __future__ import annotations

from adapters.envelope import unwrap
from adapters.inventory_sources.base import SummarySource
from core.domain.models import CreateGrnRequest, GrnDetail, GrnSummary


class GrnSource(SummarySource[GrnSummary]):
    item_model = GrnSummary
    sync_path = "/api/grns/sync"
    summary_path = "/api/grns/summary"

    async def create(self, payload: CreateGrnRequest) -> GrnDetail:
        raw = await self._request_json(
            "POST",
            "/api/grns",
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return GrnDetail.model_validate(unwrap(raw) or {})

    async def get(self, grn_id: int) -> GrnDetail:
        raw = await self._request_json("GET", f"/api/grns/{grn_id}")
        return GrnDetail.model_validate(unwrap(raw) or {})
