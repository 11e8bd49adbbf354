"""Fuente: árbol de categorías."""

from __future__ import annotations

from collections.abc import Iterable

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from adapters.inventory_sources.base import import_payload
from core.domain.models import CategoryImportRow, CategoryNode, ImportResult


class CategorySource(ApiSource):
    path = "/api/categories"

    async def tree(self) -> list[CategoryNode]:
        """Categorías raíz con sus `children` anidados."""

        raw = await self._request_json("GET", self.path)
        return [CategoryNode.model_validate(item) for item in unwrap(raw) or []]

    async def import_rows(self, rows: Iterable[CategoryImportRow]) -> ImportResult:
        raw = await self._request_json("POST", f"{self.path}/import", json=import_payload(rows))
        return ImportResult.model_validate(unwrap(raw) or {})
