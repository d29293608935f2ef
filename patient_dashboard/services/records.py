"""
Patient record join service

Gathers the child collections keyed by a patient identifier from the
record store. A patient with no entry in an association simply has no
items; that is never an error.
"""
import logging
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from patient_dashboard.core.errors import DataIntegrityError
from patient_dashboard.database.schemas import (
    Appointment,
    ClinicalNote,
    JoinedRecords,
    MedicalRecord,
    Medication,
)
from patient_dashboard.database.store import RecordStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate_items(model: Type[ModelT], items: List[Dict[str, Any]], kind: str, patient_id: str) -> List[ModelT]:
    try:
        return [model.model_validate(item) for item in items]
    except ValidationError as exc:
        logger.warning(f"Invalid {kind} stored for patient {patient_id}: {exc}")
        raise DataIntegrityError(f"Invalid {kind} stored for patient {patient_id}") from exc


def join_patient_records(patient_id: str, store: RecordStore) -> JoinedRecords:
    """
    Join medications, documents, appointments and notes for a patient

    Args:
        patient_id: Opaque patient identifier used as the join key
        store: Record store to read the associations from

    Returns:
        JoinedRecords with each collection in stored (insertion) order,
        empty where the patient has no association
    """
    medications = store.get_medications_for(patient_id)
    records = store.get_records_for(patient_id)
    appointments = store.get_appointments_for(patient_id)
    notes = store.get_notes_for(patient_id)

    logger.debug(
        f"Joined records for patient {patient_id}: medications={len(medications)} "
        f"records={len(records)} appointments={len(appointments)} notes={len(notes)}"
    )

    return JoinedRecords(
        medications=_validate_items(Medication, medications, "medication", patient_id),
        records=_validate_items(MedicalRecord, records, "document", patient_id),
        appointments=_validate_items(Appointment, appointments, "appointment", patient_id),
        notes=_validate_items(ClinicalNote, notes, "clinical note", patient_id),
    )
