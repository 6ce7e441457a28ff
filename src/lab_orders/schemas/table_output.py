"""Output schemas for the laboratory orders table."""

from pydantic import BaseModel, ConfigDict, Field

from .common import ActionKind, StatusCategory, TableStatus
from .encounter import LabEncounter, Observation

CellValue = str | int | float | bool | None


class PageState(BaseModel):
    """Current page, page size and size of the ordered, unfiltered collection."""

    model_config = ConfigDict(frozen=True)

    current_page: int = 1
    page_size: int = Field(default=10, ge=1)
    total_items: int = 0


class FilterState(BaseModel):
    """Search text and the records it filters (the current page's source set)."""

    search_text: str = ""
    base: list[LabEncounter] = []

    @property
    def query(self) -> str:
        return (self.search_text or "").strip().lower()


class ViewState(BaseModel):
    """Everything the host keeps between renders."""

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    page: PageState = PageState()
    expanded_row_ids: frozenset[str] = frozenset()


class ColumnDescriptor(BaseModel):
    """A table column."""

    id: int
    header: str
    key: str


class LegendEntry(BaseModel):
    """Colour key shown above the table."""

    label: str
    title: str
    color: str


class OrderTag(BaseModel):
    """A coloured tag naming one test order."""

    uuid: str | None = None
    display: str
    category: StatusCategory
    color: str


class ActionDescriptor(BaseModel):
    """A side effect for the host to perform on behalf of a row."""

    kind: ActionKind
    encounter_uuid: str
    patient_uuid: str | None = None
    payload: LabEncounter


class Row(BaseModel):
    """Flat projection of one encounter."""

    id: str
    order_date: str
    orders: list[OrderTag] = []
    location: str
    status: str
    actions: list[ActionDescriptor] = []
    encounter: LabEncounter
    is_expanded: bool = False

    def cell_value(self, column_key: str) -> CellValue:
        """Searchable value of the cell under ``column_key``."""
        if column_key == "orderDate":
            return self.order_date
        if column_key == "orders":
            return " ".join(tag.display for tag in self.orders)
        if column_key == "location":
            return self.location
        if column_key == "status":
            return self.status
        return None


class TableModel(BaseModel):
    """Everything needed to render the laboratory orders table."""

    status: TableStatus
    rows: list[Row] = []
    columns: list[ColumnDescriptor] = []
    total_items: int = 0
    page: PageState = PageState()
    page_sizes: list[int] = []
    legend: list[LegendEntry] = []
    error: str | None = None
    message: str | None = None

    def row(self, row_id: str) -> Row | None:
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    def lookup_cell(self, row_id: str, column_key: str) -> CellValue:
        row = self.row(row_id)
        if row is None:
            return None
        return row.cell_value(column_key)

    def expanded_detail(self, row_id: str) -> list[Observation]:
        """Observation results of the encounter behind ``row_id``."""
        row = self.row(row_id)
        if row is None:
            return []
        return list(row.encounter.obs)
