"""Page and page-size bookkeeping for the ordered encounter list."""

import logging
import math
from typing import Sequence, TypeVar

from ..config import PAGE_SIZES
from ..schemas import PageState

logger = logging.getLogger(__name__)

T = TypeVar("T")


def last_page(state: PageState) -> int:
    """Highest valid page number; 1 for an empty collection."""
    return max(1, math.ceil(state.total_items / state.page_size))


def _clamp_page(page: int, state: PageState) -> int:
    return min(max(page, 1), last_page(state))


def reconcile(state: PageState, total_items: int) -> PageState:
    """Record the size of a new snapshot and pull the page back into range."""
    updated = state.model_copy(update={"total_items": max(total_items, 0)})
    page = _clamp_page(updated.current_page, updated)
    if page != updated.current_page:
        logger.debug(
            "Page %d out of range for %d items, clamped to %d",
            updated.current_page,
            total_items,
            page,
        )
    return updated.model_copy(update={"current_page": page})


def normalize_page_size(size: int, allowed: Sequence[int] = PAGE_SIZES) -> int:
    """Snap a page size onto the allowed set.

    Sizes not in the set become the smallest allowed size that still fits
    them, or the largest allowed size.
    """
    choices = sorted(allowed)
    if size in choices:
        return size
    for choice in choices:
        if choice >= size:
            return choice
    return choices[-1]


def set_page_size(
    state: PageState, size: int, allowed: Sequence[int] = PAGE_SIZES
) -> PageState:
    """Change the page size, keeping the current page in range."""
    page_size = normalize_page_size(size, allowed)
    if page_size != size:
        logger.debug("Page size %d not allowed, using %d", size, page_size)
    updated = state.model_copy(update={"page_size": page_size})
    return updated.model_copy(
        update={"current_page": _clamp_page(updated.current_page, updated)}
    )


def go_to_page(state: PageState, page: int) -> PageState:
    """Move to ``page``, clamped into ``[1, last_page]``."""
    target = _clamp_page(page, state)
    if target != page:
        logger.debug("Page %d out of range, clamped to %d", page, target)
    return state.model_copy(update={"current_page": target})


def current_slice(state: PageState, items: Sequence[T]) -> list[T]:
    """Items shown on the current page."""
    start = (state.current_page - 1) * state.page_size
    return list(items[start : start + state.page_size])


class PaginationCoordinator:
    """Holds a ``PageState`` for hosts that prefer a stateful object."""

    def __init__(self, state: PageState | None = None, allowed: Sequence[int] = PAGE_SIZES):
        self.allowed = list(allowed)
        self.state = state or PageState(page_size=min(self.allowed))

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def page_size(self) -> int:
        return self.state.page_size

    def last_page(self) -> int:
        return last_page(self.state)

    def update_total(self, total_items: int) -> None:
        self.state = reconcile(self.state, total_items)

    def set_page_size(self, size: int) -> None:
        self.state = set_page_size(self.state, size, self.allowed)

    def go_to_page(self, page: int) -> None:
        self.state = go_to_page(self.state, page)

    def current_slice(self, items: Sequence[T]) -> list[T]:
        return current_slice(self.state, items)

    def pages(self, items: Sequence[T]) -> list[list[T]]:
        """Every page of ``items`` in order, without moving the current page."""
        state = reconcile(self.state, len(items))
        return [
            current_slice(state.model_copy(update={"current_page": page}), items)
            for page in range(1, last_page(state) + 1)
        ]
