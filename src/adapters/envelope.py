"""Desenvoltura de respuestas del backend.

Todas las respuestas llegan en uno de dos formatos:
- `{code, message, data}` (recurso único)
- `{code, message, pageNum, pageSize, total, data: [...]}` (página)

Ninguna de las dos funciones falla por sí misma: un envoltorio sin `data`
produce `None`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.domain.models import Envelope


def unwrap(envelope: Any) -> Any:
    """Devuelve el `data` del envoltorio (dict crudo o `Envelope`), o `None`."""

    if isinstance(envelope, Envelope):
        return envelope.data
    if isinstance(envelope, Mapping):
        return envelope.get("data")
    return None


def unwrap_page(page: Any) -> Any:
    """Identidad: la página ya trae todo lo que necesita el llamador.

    Existe como paso con nombre para aislar cambios futuros del formato de
    página del backend.
    """

    return page
