"""Tests for the laboratory orders workflow and the fetch collaborator."""

import json
from pathlib import Path

import pytest

from lab_orders.clients import InMemoryLabOrdersClient, fetch_lab_orders, loading_snapshot
from lab_orders.config import CONFIG_FILE, TableConfig, load_table_config
from lab_orders.exceptions import LabOrdersFetchError
from lab_orders.pipeline import build_table_model
from lab_orders.process_encounters import LabOrdersStartEvent
from lab_orders.process_encounters import workflow as lab_orders_workflow
from lab_orders.schemas import (
    FetchResult,
    LabEncounter,
    PageState,
    TableModel,
    TableStatus,
    ViewState,
)


def _make_encounter(uuid: str, day: int, tests: list[str]) -> LabEncounter:
    """Create an encounter on the given day of January 2024."""
    return LabEncounter.model_validate(
        {
            "uuid": uuid,
            "encounterDatetime": f"2024-01-{day:02d}T10:00:00.000+00:00",
            "location": {"display": "Central Lab"},
            "patient": {"uuid": "patient-1"},
            "orders": [
                {"uuid": f"{uuid}-{name}", "type": "testorder", "concept": {"display": name}}
                for name in tests
            ],
        }
    )


SNAPSHOT = [
    _make_encounter("jan-03", 3, ["Glucose", "CBC"]),
    _make_encounter("jan-10", 10, ["Hemoglobin"]),
    _make_encounter("jan-07", 7, ["Blood glucose fasting"]),
]


def test_config_file_matches_defaults() -> None:
    """The shipped config should match the model defaults."""
    config_path = Path(__file__).parent.parent / CONFIG_FILE
    assert load_table_config(config_path).model_dump() == TableConfig().model_dump()
    assert "table" in json.loads(config_path.read_text())


@pytest.mark.asyncio
async def test_workflow_builds_table_model() -> None:
    """The workflow should produce the same model as the synchronous pipeline."""
    fetch_result = FetchResult(lab_requests=SNAPSHOT)
    view = ViewState(search_text="glu")

    result = await lab_orders_workflow.run(
        start_event=LabOrdersStartEvent(fetch_result=fetch_result, view_state=view)
    )

    assert isinstance(result, TableModel)
    assert result.status == TableStatus.READY
    assert [row.id for row in result.rows] == ["jan-07", "jan-03"]
    assert result.total_items == 3
    assert result.model_dump() == build_table_model(fetch_result, view).model_dump()


@pytest.mark.asyncio
async def test_workflow_stops_on_error() -> None:
    """Errored snapshots should stop before sorting and carry the error."""
    result = await lab_orders_workflow.run(
        start_event=LabOrdersStartEvent(fetch_result=FetchResult(error="Timeout"))
    )

    assert isinstance(result, TableModel)
    assert result.status == TableStatus.ERROR
    assert result.error == "Timeout"
    assert result.rows == []


@pytest.mark.asyncio
async def test_workflow_stops_while_loading() -> None:
    result = await lab_orders_workflow.run(
        start_event=LabOrdersStartEvent(fetch_result=loading_snapshot())
    )
    assert result.status == TableStatus.LOADING


@pytest.mark.asyncio
async def test_workflow_reconciles_page() -> None:
    view = ViewState(page=PageState(current_page=5, page_size=10, total_items=50))
    result = await lab_orders_workflow.run(
        start_event=LabOrdersStartEvent(
            fetch_result=FetchResult(lab_requests=SNAPSHOT), view_state=view
        )
    )
    assert result.page.current_page == 1
    assert [row.id for row in result.rows] == ["jan-10", "jan-07", "jan-03"]


class TestFetchLabOrders:
    """Tests for wrapping fetch clients into snapshots."""

    def test_successful_fetch(self) -> None:
        client = InMemoryLabOrdersClient({"patient-1": SNAPSHOT})
        result = fetch_lab_orders(client, "patient-1")
        assert result.error is None
        assert not result.is_loading
        assert [e.uuid for e in result.lab_requests] == ["jan-03", "jan-10", "jan-07"]

    def test_fetch_error_becomes_error_snapshot(self) -> None:
        result = fetch_lab_orders(InMemoryLabOrdersClient(), "unknown")
        assert result.error is not None
        assert "unknown" in result.error
        assert result.lab_requests == []

    def test_other_errors_propagate(self) -> None:
        class BrokenClient:
            def fetch(self, patient_uuid: str) -> list[LabEncounter]:
                raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            fetch_lab_orders(BrokenClient(), "patient-1")

    def test_in_memory_client_raises_for_unknown_patient(self) -> None:
        with pytest.raises(LabOrdersFetchError):
            InMemoryLabOrdersClient().fetch("unknown")
