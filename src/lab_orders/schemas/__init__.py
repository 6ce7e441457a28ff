"""Laboratory order schemas for encounter records and the table model."""

from .common import (
    STATUS_COLORS,
    ActionKind,
    ConceptRef,
    LocationRef,
    PatientRef,
    StatusCategory,
    TableStatus,
)
from .encounter import FetchResult, LabEncounter, Observation, TestOrder
from .table_output import (
    ActionDescriptor,
    CellValue,
    ColumnDescriptor,
    FilterState,
    LegendEntry,
    OrderTag,
    PageState,
    Row,
    TableModel,
    ViewState,
)

__all__ = [
    # Common
    "STATUS_COLORS",
    "ActionKind",
    "ConceptRef",
    "LocationRef",
    "PatientRef",
    "StatusCategory",
    "TableStatus",
    # Encounter
    "FetchResult",
    "LabEncounter",
    "Observation",
    "TestOrder",
    # Output
    "ActionDescriptor",
    "CellValue",
    "ColumnDescriptor",
    "FilterState",
    "LegendEntry",
    "OrderTag",
    "PageState",
    "Row",
    "TableModel",
    "ViewState",
]
