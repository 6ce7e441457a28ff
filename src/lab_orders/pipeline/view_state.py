"""Host callbacks. Each takes a ``ViewState`` and returns the next one."""

from ..config import TableConfig
from ..schemas import FetchResult, PageState, TableModel, ViewState
from . import pagination


def initial_view_state(config: TableConfig | None = None) -> ViewState:
    """View state for a freshly mounted table."""
    config = config or TableConfig()
    page_size = pagination.normalize_page_size(config.default_page_size, config.page_sizes)
    return ViewState(page=PageState(page_size=page_size))


def on_search_text_change(view: ViewState, search_text: str | None) -> ViewState:
    return view.model_copy(update={"search_text": search_text or ""})


def _current_page_state(view: ViewState, model: TableModel | None) -> PageState:
    """Page state sized against the latest table model, when there is one."""
    if model is None:
        return view.page
    return pagination.reconcile(view.page, model.total_items)


def on_page_change(
    view: ViewState, page: int, model: TableModel | None = None
) -> ViewState:
    """Move to ``page`` within the snapshot behind ``model``."""
    page_state = _current_page_state(view, model)
    return view.model_copy(update={"page": pagination.go_to_page(page_state, page)})


def on_page_size_change(
    view: ViewState,
    page_size: int,
    model: TableModel | None = None,
    config: TableConfig | None = None,
) -> ViewState:
    config = config or TableConfig()
    page_state = _current_page_state(view, model)
    return view.model_copy(
        update={
            "page": pagination.set_page_size(page_state, page_size, config.page_sizes)
        }
    )


def on_row_expand_toggle(view: ViewState, row_id: str) -> ViewState:
    """Expand a collapsed row or collapse an expanded one."""
    expanded = set(view.expanded_row_ids)
    if row_id in expanded:
        expanded.remove(row_id)
    else:
        expanded.add(row_id)
    return view.model_copy(update={"expanded_row_ids": frozenset(expanded)})


def on_snapshot(view: ViewState, fetch_result: FetchResult) -> ViewState:
    """Reconcile the page state with a freshly fetched snapshot.

    Loading and errored snapshots leave the state untouched.
    """
    if fetch_result.is_loading or fetch_result.error:
        return view
    return view.model_copy(
        update={
            "page": pagination.reconcile(view.page, len(fetch_result.lab_requests))
        }
    )
