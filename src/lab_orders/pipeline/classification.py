"""Status classification and colour coding of test orders."""

from datetime import datetime
from typing import Iterable

from ..config import TableConfig
from ..schemas import LegendEntry, StatusCategory, TestOrder
from .timestamps import parse_timestamp

DEFAULT_REJECTED_REASONS = TableConfig().rejected_stop_reasons


def classify_order(
    date_activated: str | datetime | None,
    date_stopped: str | datetime | None,
    stop_reason: str | None = None,
    rejected_reasons: Iterable[str] = DEFAULT_REJECTED_REASONS,
) -> StatusCategory:
    """Map an order's timestamps and stop reason to a status category.

    An order without a usable activation or stop time is Requested. A
    stopped order is Rejected when its stop reason is in
    ``rejected_reasons`` and Completed otherwise.
    """
    if parse_timestamp(date_activated) is None or parse_timestamp(date_stopped) is None:
        return StatusCategory.REQUESTED
    rejected = {reason.upper() for reason in rejected_reasons}
    if stop_reason and stop_reason.strip().upper() in rejected:
        return StatusCategory.REJECTED
    return StatusCategory.COMPLETED


def order_status(
    order: TestOrder, rejected_reasons: Iterable[str] = DEFAULT_REJECTED_REASONS
) -> StatusCategory:
    return classify_order(
        order.date_activated,
        order.date_stopped,
        order.fulfiller_status,
        rejected_reasons,
    )


def order_color(
    order: TestOrder, rejected_reasons: Iterable[str] = DEFAULT_REJECTED_REASONS
) -> str:
    return order_status(order, rejected_reasons).color


def legend() -> list[LegendEntry]:
    """Colour key entries in display order."""
    return [
        LegendEntry(label=category.value, title=category.title, color=category.color)
        for category in StatusCategory
    ]
