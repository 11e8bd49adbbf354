"""Fuente: rebajas por caducidad próxima.

Ojo: estos endpoints cuelgan de la raíz, sin el prefijo `/api`.
"""

from __future__ import annotations

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from core.domain.models import MarkdownApplyRequest, MarkdownApplyResult, MarkdownRecommendation


class MarkdownSource(ApiSource):
    path = "/markdowns"

    async def recommendations(self, days: int) -> list[MarkdownRecommendation]:
        raw = await self._request_json("GET", f"{self.path}/recommendations", params={"days": days})
        return [MarkdownRecommendation.model_validate(item) for item in unwrap(raw) or []]

    async def apply(self, payload: MarkdownApplyRequest) -> MarkdownApplyResult:
        raw = await self._request_json(
            "POST",
            f"{self.path}/apply",
            json=payload.model_dump(mode="json", by_alias=True),
        )
        return MarkdownApplyResult.model_validate(unwrap(raw) or {})
