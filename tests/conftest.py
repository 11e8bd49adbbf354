from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from adapters.http_client import build_async_client
from core.config import AppSettings

BASE_URL = "http://backend.test"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url=BASE_URL,
        api_token="tok-123",
        token_type="Bearer",
        page_size=100,
    )


@pytest.fixture
def make_client(settings: AppSettings) -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return build_async_client(settings, transport=httpx.MockTransport(handler))

    return _make


def page_body(*, page_num: int, page_size: int, total: int | None, data: list[dict]) -> dict:
    body: dict = {
        "code": "SUCCESS",
        "message": "OK",
        "pageNum": page_num,
        "pageSize": page_size,
        "data": data,
    }
    if total is not None:
        body["total"] = total
    return body
