"""Laboratory encounter schemas as delivered by the fetch collaborator."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from .common import ConceptRef, LocationRef, PatientRef, RecordModel


class TestOrder(RecordModel):
    """A request for a laboratory test within an encounter."""

    __test__ = False

    uuid: str | None = None
    type: str | None = None
    concept: ConceptRef | None = None
    date_activated: str | datetime | None = None
    date_stopped: str | datetime | None = None
    fulfiller_status: str | None = None

    @property
    def display(self) -> str | None:
        return self.concept.display if self.concept else None


class Observation(RecordModel):
    """An observation result recorded against an encounter."""

    uuid: str | None = None
    concept: ConceptRef | None = None
    value: Any = None
    obs_datetime: str | datetime | None = None


class LabEncounter(RecordModel):
    """One clinical event producing test orders and/or results."""

    uuid: str
    encounter_datetime: str | datetime | None = None
    location: LocationRef | None = None
    patient: PatientRef | None = None
    orders: list[TestOrder] = []
    obs: list[Observation] = []


class FetchResult(BaseModel):
    """Snapshot handed over by the record-fetch collaborator."""

    lab_requests: list[LabEncounter] = []
    is_loading: bool = False
    error: str | None = None
