"""Projection of encounters into table rows."""

from ..config import PLACEHOLDER, TableConfig
from ..schemas import ColumnDescriptor, LabEncounter, OrderTag, Row, TestOrder
from .actions import build_row_actions
from .classification import order_status
from .timestamps import format_date

COLUMNS = [
    ColumnDescriptor(id=0, header="Test Date", key="orderDate"),
    ColumnDescriptor(id=1, header="Tests", key="orders"),
    ColumnDescriptor(id=2, header="Location", key="location"),
    ColumnDescriptor(id=3, header="Status", key="status"),
    ColumnDescriptor(id=4, header="Action", key="actions"),
]


def project_order(order: TestOrder, config: TableConfig) -> OrderTag:
    """Coloured tag for a single test order."""
    category = order_status(order, config.rejected_stop_reasons)
    return OrderTag(
        uuid=order.uuid,
        display=order.display or "",
        category=category,
        color=category.color,
    )


def project_encounter(encounter: LabEncounter, config: TableConfig | None = None) -> Row:
    """Flatten an encounter into a table row.

    Only orders of the configured test-order kind get a tag. The status cell
    is always the placeholder; it is not derived from the results yet.
    """
    config = config or TableConfig()
    location = encounter.location.display if encounter.location else None
    return Row(
        id=encounter.uuid,
        order_date=format_date(encounter.encounter_datetime, config.date_format),
        orders=[
            project_order(order, config)
            for order in encounter.orders
            if order.type == config.test_order_type
        ],
        location=location or PLACEHOLDER,
        status=PLACEHOLDER,
        actions=build_row_actions(encounter, config),
        encounter=encounter,
    )
