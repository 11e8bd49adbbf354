"""Full-collection pagination aggregator.

Walks the listing endpoint of a collection page by page until the whole
collection is in memory. One generic implementation serves every collection
(goods-receipt notes, purchase orders, inventory, suppliers); each collection
only contributes its page fetcher.

Termination: stop on the first empty page, or as soon as the running count
reaches the `total` reported by the server on the latest page. When the server
omits `total` only the empty-page guard applies.

Failure: any exception raised by the fetcher aborts the walk. Nothing
accumulated so far is returned; the exception propagates untouched.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from core.interfaces.pagination import PageFetcher

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 100

logger = logging.getLogger(__name__)


@dataclass
class AggregationState(Generic[T]):
    """Per-call accumulator. Lives on the stack of one `fetch_all` call."""

    accumulated: list[T] = field(default_factory=list)
    page_num: int = 1
    total: float = math.inf

    def is_complete(self) -> bool:
        return len(self.accumulated) >= self.total


async def fetch_all_pages(
    list_page: PageFetcher[T],
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    filter: Any = None,
    label: str = "collection",
) -> list[T]:
    """Fetch every page sequentially and return the concatenated items."""

    if page_size <= 0:
        raise ValueError("page_size must be positive")

    state: AggregationState[T] = AggregationState()
    while True:
        try:
            page = await list_page(state.page_num, page_size, filter)
        except Exception:
            logger.warning(
                "%s: page %d failed after %d items, discarding partial result",
                label,
                state.page_num,
                len(state.accumulated),
            )
            raise

        state.accumulated.extend(page.data)
        state.total = math.inf if page.total is None else page.total
        logger.debug(
            "%s: page %d -> %d items (%d/%s)",
            label,
            state.page_num,
            len(page.data),
            len(state.accumulated),
            "?" if page.total is None else page.total,
        )

        if not page.data:
            break
        if state.is_complete():
            break
        state.page_num += 1

    logger.info("%s: aggregated %d items in %d pages", label, len(state.accumulated), state.page_num)
    return state.accumulated


class PaginatedAggregator(Generic[T]):
    """Binds a page fetcher and a page size into a reusable `fetch_all`.

    Instances hold no per-call state; concurrent calls perform independent
    walks.
    """

    def __init__(
        self,
        list_page: PageFetcher[T],
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        label: str = "collection",
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._list_page = list_page
        self._page_size = page_size
        self._label = label

    @property
    def page_size(self) -> int:
        return self._page_size

    async def fetch_all(self, filter: Any = None) -> list[T]:
        return await fetch_all_pages(
            self._list_page,
            page_size=self._page_size,
            filter=filter,
            label=self._label,
        )
