"""Newest-first ordering of laboratory encounters."""

from ..schemas import LabEncounter
from .timestamps import sort_key


def sort_newest_first(encounters: list[LabEncounter]) -> list[LabEncounter]:
    """Return a new list ordered by encounter time, most recent first.

    The sort is stable, so encounters with equal timestamps keep their input
    order. Encounters with a missing or malformed timestamp go last.
    """
    return sorted(
        encounters,
        key=lambda e: sort_key(e.encounter_datetime),
        reverse=True,
    )
