"""Fuente: alertas agregadas (stock bajo, caducidad, baja rotación)."""

from __future__ import annotations

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from core.domain.models import AlertsAggregate


class AlertSource(ApiSource):
    async def get(self) -> AlertsAggregate:
        raw = await self._request_json("GET", "/api/alerts")
        return AlertsAggregate.model_validate(unwrap(raw) or {})
