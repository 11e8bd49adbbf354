"""Fuente: directorio de proveedores.

No tiene endpoint de sync. El listado acepta búsqueda libre en `q`.
"""

from __future__ import annotations

from typing import Any

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from adapters.inventory_sources.base import page_params, parse_page
from core.domain.models import CreateSupplierRequest, Page, Supplier


class SupplierSource(ApiSource):
    path = "/api/suppliers"

    async def list_page(self, page_num: int, page_size: int, filter: Any = None) -> Page[Supplier]:
        params: dict[str, Any] = page_params(page_num, page_size)
        if filter is not None:
            params["q"] = filter
        raw = await self._request_json("GET", self.path, params=params)
        return parse_page(raw, Supplier)

    async def create(self, payload: CreateSupplierRequest) -> Supplier:
        raw = await self._request_json(
            "POST",
            self.path,
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return Supplier.model_validate(unwrap(raw) or {})
