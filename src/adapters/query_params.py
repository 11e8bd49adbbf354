"""Serialización de query strings para la búsqueda de lotes vendibles.

Reglas:
- Campos ausentes o `None` se omiten (nunca `key=` vacío por ausencia).
- Escalares -> un par `key=value`.
- Listas -> un par por elemento, en orden, con la clave repetida
  (`categoryIds=1&categoryIds=2`), nunca unidas por comas.
- En listas se descartan en silencio los elementos `None` o que no
  representan un número finito (NaN, inf, texto no numérico).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from core.domain.models import SellableLotQuery


def _is_finite_number(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    # 2.0 -> "2": los IDs suelen llegar como float desde hojas de cálculo.
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def iter_query_pairs(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                if not _is_finite_number(item):
                    continue
                pairs.append((key, _format_value(item)))
            continue
        pairs.append((key, _format_value(value)))
    return pairs


def serialize_query_params(query: SellableLotQuery | Mapping[str, Any]) -> str:
    """Codifica el filtro como query string (sin `?` inicial)."""

    if isinstance(query, SellableLotQuery):
        params: Mapping[str, Any] = query.model_dump(by_alias=True, exclude_none=True)
    else:
        params = query
    return urlencode(iter_query_pairs(params))
