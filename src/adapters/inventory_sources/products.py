"""Fuente: catálogo de productos."""

from __future__ import annotations

from collections.abc import Iterable

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from adapters.inventory_sources.base import import_payload
from core.domain.models import ImportResult, Product, ProductImportRow, ProductRequest


class ProductSource(ApiSource):
    path = "/api/products"

    async def list_all(self) -> list[Product]:
        """Catálogo completo en una sola llamada (el endpoint no pagina)."""

        raw = await self._request_json("GET", self.path)
        return [Product.model_validate(item) for item in unwrap(raw) or []]

    async def get(self, product_id: int | str) -> Product:
        raw = await self._request_json("GET", f"{self.path}/{product_id}")
        return Product.model_validate(unwrap(raw) or {})

    async def create(self, payload: ProductRequest) -> Product:
        raw = await self._request_json(
            "POST",
            self.path,
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return Product.model_validate(unwrap(raw) or {})

    async def update(self, product_id: int | str, payload: ProductRequest) -> Product:
        raw = await self._request_json(
            "PUT",
            f"{self.path}/{product_id}",
            json=payload.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return Product.model_validate(unwrap(raw) or {})

    async def import_rows(self, rows: Iterable[ProductImportRow]) -> ImportResult:
        raw = await self._request_json("POST", f"{self.path}/import", json=import_payload(rows))
        return ImportResult.model_validate(unwrap(raw) or {})
