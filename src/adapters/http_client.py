"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers y la cabecera Authorization.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Errores:
- Las respuestas no-2xx levantan `httpx.HTTPStatusError` (`raise_for_status`).
- Los fallos de red levantan `httpx.TransportError`.
- Ninguno se captura aquí: se propagan tal cual al llamador.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    token: str | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando al backend.

    `token` tiene prioridad sobre `settings.api_token`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    access_token = token or settings.api_token
    if access_token:
        headers["Authorization"] = f"{settings.token_type} {access_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class ApiSource:
    """Base de las fuentes REST.

    Si se pasa `client`, todas las llamadas lo reutilizan (y el llamador lo
    cierra). Si no, cada llamada abre y cierra su propio cliente.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: Any = None,
        json: Any = None,
    ) -> Any:
        if self._client is not None:
            resp = await self._client.request(method, path, params=params, json=json)
        else:
            async with build_async_client(self._settings) as client:
                resp = await client.request(method, path, params=params, json=json)

        resp.raise_for_status()
        if not resp.content:
            return None
        return resp.json()
