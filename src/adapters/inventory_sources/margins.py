"""Fuente: perfiles de margen por categoría padre."""

from __future__ import annotations

from collections.abc import Iterable

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from adapters.inventory_sources.base import import_payload
from core.domain.models import (
    ImportResult,
    MarginProfile,
    MarginProfileImportRow,
    UpdateMarginProfileRequest,
)


class MarginProfileSource(ApiSource):
    path = "/api/margin-profiles"

    async def list_all(self) -> list[MarginProfile]:
        raw = await self._request_json("GET", self.path)
        return [MarginProfile.model_validate(item) for item in unwrap(raw) or []]

    async def update(self, profile_id: int, payload: UpdateMarginProfileRequest) -> MarginProfile:
        raw = await self._request_json(
            "PUT",
            f"{self.path}/{profile_id}",
            json=payload.model_dump(mode="json", by_alias=True),
        )
        return MarginProfile.model_validate(unwrap(raw) or {})

    async def import_rows(self, rows: Iterable[MarginProfileImportRow]) -> ImportResult:
        raw = await self._request_json("POST", f"{self.path}/import", json=import_payload(rows))
        return ImportResult.model_validate(unwrap(raw) or {})
