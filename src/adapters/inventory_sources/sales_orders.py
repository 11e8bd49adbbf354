"""Fuente: órdenes de venta y búsqueda de lotes vendibles."""

from __future__ import annotations

import httpx

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from adapters.query_params import serialize_query_params
from core.domain.models import (
    CreateSalesOrderRequest,
    CreateSalesOrderResponse,
    PendingSalesOrderStatus,
    SalesOrderContext,
    SellableLot,
    SellableLotQuery,
)


class SalesOrderSource(ApiSource):
    path = "/api/sales-orders"

    async def context(self) -> SalesOrderContext:
        raw = await self._request_json("GET", f"{self.path}/context")
        return SalesOrderContext.model_validate(unwrap(raw) or {})

    async def search_sellable_lots(self, query: SellableLotQuery) -> list[SellableLot]:
        """Una sola llamada (sin paginación); el filtro va serializado a mano."""

        params = httpx.QueryParams(serialize_query_params(query))
        raw = await self._request_json("GET", f"{self.path}/available-items", params=params)
        items = unwrap(raw) or []
        return [SellableLot.model_validate(item) for item in items]

    async def create(self, payload: CreateSalesOrderRequest) -> CreateSalesOrderResponse:
        raw = await self._request_json(
            "POST",
            self.path,
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return CreateSalesOrderResponse.model_validate(unwrap(raw) or {})

    async def pending_status(self, pending_id: int) -> PendingSalesOrderStatus:
        raw = await self._request_json("GET", f"{self.path}/pending/{pending_id}")
        return PendingSalesOrderStatus.model_validate(unwrap(raw) or {})

    async def cancel_pending(self, pending_id: int) -> None:
        await self._request_json("DELETE", f"{self.path}/pending/{pending_id}")
