"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.pagination import CollectionSynchronizer, PageFetcher

__all__ = ["CollectionSynchronizer", "PageFetcher"]
