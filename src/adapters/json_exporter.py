"""Exportación JSON de colecciones agregadas.

Por qué JSON:
- Interoperabilidad con hojas de cálculo y pipelines.
- Conserva los campos de negocio que el cliente no interpreta.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel


def export_collection_json(*, items: Sequence[BaseModel], output_path: Path) -> Path:
    """Exporta la colección a JSON UTF-8 con formato estable (claves camelCase)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [item.model_dump(mode="json", by_alias=True) for item in items]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
