"""Collaborators that supply encounter records and patient details."""

import logging
from typing import Protocol

from .exceptions import LabOrdersFetchError
from .schemas import FetchResult, LabEncounter, PatientRef

logger = logging.getLogger(__name__)


class LabOrdersClient(Protocol):
    """Fetches the laboratory encounters of a patient."""

    def fetch(self, patient_uuid: str) -> list[LabEncounter]: ...


class PatientLookup(Protocol):
    """Resolves a patient by uuid for the print and e-mail actions."""

    def get_patient(self, patient_uuid: str) -> PatientRef | None: ...


class InMemoryLabOrdersClient:
    """Serves encounters from a dict keyed by patient uuid."""

    def __init__(self, encounters: dict[str, list[LabEncounter]] | None = None):
        self.encounters = encounters or {}

    def fetch(self, patient_uuid: str) -> list[LabEncounter]:
        if patient_uuid not in self.encounters:
            raise LabOrdersFetchError(f"No lab orders found for patient {patient_uuid}")
        return list(self.encounters[patient_uuid])


def fetch_lab_orders(client: LabOrdersClient, patient_uuid: str) -> FetchResult:
    """Run a fetch and wrap the outcome in a snapshot.

    A ``LabOrdersFetchError`` becomes an error snapshot; anything else
    propagates.
    """
    try:
        encounters = client.fetch(patient_uuid)
    except LabOrdersFetchError as exc:
        logger.warning("Lab orders fetch failed for patient %s: %s", patient_uuid, exc)
        return FetchResult(error=str(exc))
    return FetchResult(lab_requests=encounters)


def loading_snapshot() -> FetchResult:
    """Snapshot to render while a fetch is in flight."""
    return FetchResult(is_loading=True)
