"""Side-effect descriptors for the print and e-mail row actions."""

from ..clients import PatientLookup
from ..config import TableConfig
from ..schemas import ActionDescriptor, ActionKind, LabEncounter, PatientRef


def _patient_uuid(encounter: LabEncounter) -> str | None:
    return encounter.patient.uuid if encounter.patient else None


def build_print_action(encounter: LabEncounter) -> ActionDescriptor:
    """Ask the host to print the results summary of ``encounter``."""
    return ActionDescriptor(
        kind=ActionKind.PRINT,
        encounter_uuid=encounter.uuid,
        patient_uuid=_patient_uuid(encounter),
        payload=encounter,
    )


def build_email_action(encounter: LabEncounter) -> ActionDescriptor:
    """Ask the host to open the send-email dialog for ``encounter``."""
    return ActionDescriptor(
        kind=ActionKind.EMAIL,
        encounter_uuid=encounter.uuid,
        patient_uuid=_patient_uuid(encounter),
        payload=encounter,
    )


def build_row_actions(
    encounter: LabEncounter, config: TableConfig
) -> list[ActionDescriptor]:
    actions = [build_print_action(encounter)]
    if config.email_action_enabled:
        actions.append(build_email_action(encounter))
    return actions


def resolve_patient(
    action: ActionDescriptor, lookup: PatientLookup
) -> PatientRef | None:
    """Patient details for an action, falling back to the encounter's own reference."""
    if action.patient_uuid:
        patient = lookup.get_patient(action.patient_uuid)
        if patient is not None:
            return patient
    return action.payload.patient
