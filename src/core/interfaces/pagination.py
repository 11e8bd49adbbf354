"""Contratos de paginación.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Las fuentes HTTP (GRN, órdenes de compra, inventario, proveedores) y los
  fakes de test son intercambiables frente al agregador.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from core.domain.models import Page

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PageFetcher(Protocol[T_co]):
    """Lectura de una página del endpoint de listado.

    Reglas de diseño:
    - `page_num` es base 1.
    - `filter` es opaco para el agregador; cada fuente decide qué admite.
    """

    async def __call__(self, page_num: int, page_size: int, filter: Any = None) -> Page[T_co]:
        ...


@runtime_checkable
class CollectionSynchronizer(Protocol[T_co]):
    """Refresco server-side de una colección.

    El backend re-deriva el dataset y devuelve la primera página ya
    refrescada en la misma respuesta.
    """

    async def sync(self, page_num: int, page_size: int) -> Page[T_co]:
        ...
