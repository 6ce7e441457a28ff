"""Sorting, pagination, search and projection of laboratory encounters."""

import logging

from ..config import EMPTY_MESSAGE, TableConfig
from ..schemas import (
    FetchResult,
    FilterState,
    LabEncounter,
    PageState,
    Row,
    TableModel,
    TableStatus,
    ViewState,
)
from .classification import classify_order, legend, order_color, order_status
from .filtering import apply_filter, filter_by_test_name, filter_row_ids
from .pagination import (
    PaginationCoordinator,
    current_slice,
    go_to_page,
    last_page,
    reconcile,
    set_page_size,
)
from .projection import COLUMNS, project_encounter
from .sorting import sort_newest_first

__all__ = [
    "COLUMNS",
    "PaginationCoordinator",
    "apply_filter",
    "assemble_table_model",
    "build_table_model",
    "classify_order",
    "current_slice",
    "filter_by_test_name",
    "filter_row_ids",
    "gated_table_model",
    "go_to_page",
    "last_page",
    "legend",
    "order_color",
    "order_status",
    "project_encounter",
    "reconcile",
    "search_rows",
    "set_page_size",
    "sort_newest_first",
]

logger = logging.getLogger(__name__)


def _base_model(status: TableStatus, page: PageState, config: TableConfig) -> TableModel:
    return TableModel(
        status=status,
        columns=COLUMNS,
        total_items=page.total_items,
        page=page,
        page_sizes=config.page_sizes,
        legend=legend(),
    )


def gated_table_model(
    fetch_result: FetchResult, view_state: ViewState, config: TableConfig
) -> TableModel | None:
    """Table model for a loading or errored snapshot, None otherwise."""
    if fetch_result.is_loading:
        return _base_model(TableStatus.LOADING, view_state.page, config)
    if fetch_result.error:
        logger.warning("Lab orders unavailable: %s", fetch_result.error)
        model = _base_model(TableStatus.ERROR, view_state.page, config)
        model.error = fetch_result.error
        return model
    return None


def assemble_table_model(
    rows: list[Row], page: PageState, view_state: ViewState, config: TableConfig
) -> TableModel:
    """Wrap projected rows, marking the expanded ones."""
    rows = [
        row.model_copy(update={"is_expanded": row.id in view_state.expanded_row_ids})
        for row in rows
    ]
    if not rows:
        model = _base_model(TableStatus.EMPTY, page, config)
        model.message = EMPTY_MESSAGE
        return model
    model = _base_model(TableStatus.READY, page, config)
    model.rows = rows
    return model


def build_table_model(
    fetch_result: FetchResult,
    view_state: ViewState,
    config: TableConfig | None = None,
) -> TableModel:
    """Turn a fetch snapshot and the host's view state into a table model.

    Steps:
    - Gate: loading and errored snapshots produce no rows
    - Sort newest first
    - Reconcile the page with the snapshot size and take the current slice
    - Search the slice by test name
    - Project each remaining encounter into a row
    """
    config = config or TableConfig()

    gated = gated_table_model(fetch_result, view_state, config)
    if gated is not None:
        return gated

    ordered: list[LabEncounter] = sort_newest_first(fetch_result.lab_requests)
    page = reconcile(view_state.page, len(ordered))
    visible = apply_filter(
        FilterState(search_text=view_state.search_text, base=current_slice(page, ordered))
    )
    rows = [project_encounter(encounter, config) for encounter in visible]

    logger.debug(
        "Projected %d of %d encounters (page %d of %d)",
        len(rows),
        len(ordered),
        page.current_page,
        last_page(page),
    )
    return assemble_table_model(rows, page, view_state, config)


def search_rows(model: TableModel, query_text: str) -> list[str]:
    """Ids of the model's rows where any column contains ``query_text``."""
    return filter_row_ids(
        [row.id for row in model.rows], model.columns, model.lookup_cell, query_text
    )
