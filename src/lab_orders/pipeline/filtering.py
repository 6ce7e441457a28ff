"""Free-text search over encounters and table rows."""

from typing import Callable, Sequence

from ..schemas import CellValue, ColumnDescriptor, FilterState, LabEncounter


def _normalize(query_text: str | None) -> str:
    return (query_text or "").strip().lower()


def matches_test_name(encounter: LabEncounter, query: str) -> bool:
    """Whether any order's concept name contains an already-normalized query."""
    return any(
        query in order.display.lower()
        for order in encounter.orders
        if order.display
    )


def filter_by_test_name(
    records: list[LabEncounter], query_text: str | None
) -> list[LabEncounter]:
    """Keep the records with at least one test whose name contains the query.

    Matching is case-insensitive and ignores surrounding whitespace in the
    query. An empty query keeps everything. Input order is preserved.
    """
    query = _normalize(query_text)
    if not query:
        return list(records)
    return [record for record in records if matches_test_name(record, query)]


def apply_filter(state: FilterState) -> list[LabEncounter]:
    """Run the test-name search held by a ``FilterState``."""
    return filter_by_test_name(state.base, state.search_text)


def filter_row_ids(
    row_ids: Sequence[str],
    columns: Sequence[ColumnDescriptor],
    lookup_cell: Callable[[str, str], CellValue],
    query_text: str,
) -> list[str]:
    """Keep the row ids where any column's value contains the query.

    Values are compared as lower-cased strings. Boolean and missing cells
    never match.
    """
    query = (query_text or "").lower()

    def _matches(row_id: str) -> bool:
        for column in columns:
            value = lookup_cell(row_id, column.key)
            if value is None or isinstance(value, bool):
                continue
            if query in str(value).lower():
                return True
        return False

    return [row_id for row_id in row_ids if _matches(row_id)]
