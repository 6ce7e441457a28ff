"""Laboratory orders table workflow.

A 4-step pipeline that:
1. Gates the fetch snapshot and sorts encounters newest first
2. Reconciles the page state and slices the current page
3. Searches the page by test name
4. Projects the remaining encounters into table rows
"""

import logging
from typing import Annotated, Literal, Union

from pydantic import BaseModel
from workflows import Context, Workflow, step
from workflows.events import Event, StartEvent, StopEvent
from workflows.resource import ResourceConfig

from .config import CONFIG_FILE, TableConfig
from .pipeline import (
    apply_filter,
    assemble_table_model,
    current_slice,
    gated_table_model,
    project_encounter,
    reconcile,
    sort_newest_first,
)
from .schemas import (
    FetchResult,
    FilterState,
    LabEncounter,
    PageState,
    TableModel,
    ViewState,
)

logger = logging.getLogger(__name__)


# --- Events ---


class LabOrdersStartEvent(StartEvent):
    """Start event with a fetch snapshot and the host's view state."""

    fetch_result: FetchResult
    view_state: ViewState = ViewState()


class StatusEvent(Event):
    """Progress status update for the client."""

    message: str
    level: Literal["info", "warning", "error"] = "info"


class EncountersSortedEvent(Event):
    """Emitted after the snapshot is ordered newest first."""

    pass


class PageSlicedEvent(Event):
    """Emitted after the current page has been sliced."""

    pass


class PageFilteredEvent(Event):
    """Emitted after the page has been searched."""

    pass


# --- Workflow State ---


class WorkflowState(BaseModel):
    """State persisted across workflow steps."""

    view_state: ViewState = ViewState()
    ordered: list[LabEncounter] = []
    page: PageState = PageState()
    page_items: list[LabEncounter] = []
    visible: list[LabEncounter] = []


# --- Workflow ---


class LabOrdersWorkflow(Workflow):
    """Build the laboratory orders table model for one fetch snapshot."""

    @step()
    async def sort_encounters(
        self,
        event: LabOrdersStartEvent,
        ctx: Context[WorkflowState],
        table_config: Annotated[
            TableConfig,
            ResourceConfig(
                config_file=CONFIG_FILE,
                path_selector="table",
                label="Table Settings",
                description="Pagination, projection and status settings",
            ),
        ],
    ) -> Union[EncountersSortedEvent, StopEvent]:
        """Stop early on loading or errored snapshots, otherwise sort."""
        gated = gated_table_model(event.fetch_result, event.view_state, table_config)
        if gated is not None:
            ctx.write_event_to_stream(
                StatusEvent(
                    message=f"Lab orders {gated.status.value}",
                    level="error" if gated.error else "info",
                )
            )
            return StopEvent(result=gated)

        ordered = sort_newest_first(event.fetch_result.lab_requests)

        async with ctx.store.edit_state() as state:
            state.view_state = event.view_state
            state.ordered = ordered

        ctx.write_event_to_stream(
            StatusEvent(message=f"Sorted {len(ordered)} encounters")
        )
        return EncountersSortedEvent()

    @step()
    async def paginate(
        self,
        event: EncountersSortedEvent,
        ctx: Context[WorkflowState],
    ) -> PageSlicedEvent:
        """Pull the page back into range and slice it."""
        state = await ctx.store.get_state()

        page = reconcile(state.view_state.page, len(state.ordered))
        page_items = current_slice(page, state.ordered)

        async with ctx.store.edit_state() as state:
            state.page = page
            state.page_items = page_items

        return PageSlicedEvent()

    @step()
    async def filter_page(
        self,
        event: PageSlicedEvent,
        ctx: Context[WorkflowState],
    ) -> PageFilteredEvent:
        """Search the current page by test name."""
        state = await ctx.store.get_state()

        visible = apply_filter(
            FilterState(search_text=state.view_state.search_text, base=state.page_items)
        )

        async with ctx.store.edit_state() as state:
            state.visible = visible

        return PageFilteredEvent()

    @step()
    async def project_rows(
        self,
        event: PageFilteredEvent,
        ctx: Context[WorkflowState],
        table_config: Annotated[
            TableConfig,
            ResourceConfig(
                config_file=CONFIG_FILE,
                path_selector="table",
                label="Table Settings",
                description="Pagination, projection and status settings",
            ),
        ],
    ) -> StopEvent:
        """Project the visible encounters and assemble the table model."""
        state = await ctx.store.get_state()

        rows = [project_encounter(encounter, table_config) for encounter in state.visible]
        model: TableModel = assemble_table_model(
            rows, state.page, state.view_state, table_config
        )

        ctx.write_event_to_stream(
            StatusEvent(message=f"Showing {len(model.rows)} of {model.total_items} encounters")
        )
        return StopEvent(result=model)


workflow = LabOrdersWorkflow(timeout=None)
