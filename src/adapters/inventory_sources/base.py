"""Fuente genérica para colecciones con resumen paginado + sync.

Cada colección (GRN, órdenes de compra, inventario) expone:
- POST `<base>/sync?pageNum&pageSize` -> refresca y devuelve la 1ª página.
- GET  `<base>/summary?pageNum&pageSize` -> una página del resumen.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from adapters.envelope import unwrap_page
from adapters.http_client import ApiSource
from core.domain.models import ApiModel, Page

T = TypeVar("T", bound=ApiModel)


def parse_page(raw: Any, item_model: type[T]) -> Page[T]:
    return Page[item_model].model_validate(unwrap_page(raw))  # type: ignore[valid-type]


def page_params(page_num: int, page_size: int) -> dict[str, int]:
    return {"pageNum": page_num, "pageSize": page_size}


class SummarySource(ApiSource, Generic[T]):
    item_model: ClassVar[type[ApiModel]]
    sync_path: ClassVar[str]
    summary_path: ClassVar[str]

    async def sync(self, page_num: int, page_size: int) -> Page[T]:
        raw = await self._request_json("POST", self.sync_path, params=page_params(page_num, page_size))
        return parse_page(raw, self.item_model)  # type: ignore[arg-type]

    async def list_page(self, page_num: int, page_size: int, filter: Any = None) -> Page[T]:
        # Los resúmenes no admiten filtro; `filter` se ignora.
        raw = await self._request_json("GET", self.summary_path, params=page_params(page_num, page_size))
        return parse_page(raw, self.item_model)  # type: ignore[arg-type]


def import_payload(rows: Iterable[ApiModel]) -> dict[str, list[dict[str, Any]]]:
    """Cuerpo `{rows: [...]}` de los endpoints `/import`."""

    return {"rows": [row.model_dump(mode="json", by_alias=True, exclude_none=True) for row in rows]}
