"""Shared types for laboratory order schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """Base for read-only records received from the clinical backend."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class StatusCategory(str, Enum):
    """Lifecycle stage of a test order, as shown by its tag colour."""

    REQUESTED = "Requested"
    COMPLETED = "Completed"
    REJECTED = "Rejected"

    @property
    def color(self) -> str:
        return STATUS_COLORS[self]

    @property
    def title(self) -> str:
        return STATUS_TITLES[self]


STATUS_COLORS: dict[StatusCategory, str] = {
    StatusCategory.REQUESTED: "#6F6F6F",
    StatusCategory.COMPLETED: "green",
    StatusCategory.REJECTED: "red",
}

STATUS_TITLES: dict[StatusCategory, str] = {
    StatusCategory.REQUESTED: "Result Requested",
    StatusCategory.COMPLETED: "Result Complete",
    StatusCategory.REJECTED: "Result Rejected",
}


class TableStatus(str, Enum):
    """Which state the table should be rendered in."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


class ActionKind(str, Enum):
    """Side effects a row can hand off to the host."""

    PRINT = "print"
    EMAIL = "email"


class ConceptRef(RecordModel):
    """Reference to a clinical concept (test type, observation type)."""

    uuid: str | None = None
    display: str | None = None


class LocationRef(RecordModel):
    """Reference to the location an encounter took place at."""

    uuid: str | None = None
    display: str | None = None


class PatientRef(RecordModel):
    """Reference to the patient an encounter belongs to."""

    uuid: str | None = None
    display: str | None = None
