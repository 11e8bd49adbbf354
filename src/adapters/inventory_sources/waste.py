"""Fuente: registro de mermas."""

from __future__ import annotations

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from core.domain.models import WasteMovement, WasteRequest


class WasteSource(ApiSource):
    async def record(self, payload: WasteRequest) -> WasteMovement:
        raw = await self._request_json(
            "POST",
            "/waste",
            json=payload.model_dump(mode="json", by_alias=True),
        )
        return WasteMovement.model_validate(unwrap(raw) or {})
