"""Fuente: sugerencias de reposición (punto de pedido y stock de seguridad)."""

from __future__ import annotations

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from core.domain.models import ReplenishmentSuggestion


class ReplenishmentSource(ApiSource):
    async def suggestions(self) -> list[ReplenishmentSuggestion]:
        raw = await self._request_json("GET", "/replenishments/suggestions")
        return [ReplenishmentSuggestion.model_validate(item) for item in unwrap(raw) or []]
