"""Fuente: login contra `/api/auth/login`."""

from __future__ import annotations

from adapters.envelope import unwrap
from adapters.http_client import ApiSource
from core.domain.models import LoginResponse


class AuthSource(ApiSource):
    async def login(self, username: str, password: str) -> LoginResponse:
        raw = await self._request_json(
            "POST",
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        return LoginResponse.model_validate(unwrap(raw))
