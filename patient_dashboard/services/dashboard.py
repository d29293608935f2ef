"""
Patient dashboard assembly

Issues the independent store lookups concurrently, waits for all of them
and composes the dashboard view model.
"""
import asyncio
import logging
from datetime import datetime
from typing import List, Optional, Union

from pydantic import ValidationError

from patient_dashboard.core.errors import DataIntegrityError
from patient_dashboard.database.schemas import Patient, PatientDashboard, TimeWindow, VitalSample
from patient_dashboard.database.store import RecordStore
from patient_dashboard.services.records import join_patient_records
from patient_dashboard.services.view_model import compose_view_model

logger = logging.getLogger(__name__)


def load_patient(patient_id: str, store: RecordStore) -> Patient:
    """
    Load and validate a patient

    Raises:
        PatientNotFoundError: unknown patient_id (propagated from the store)
        DataIntegrityError: stored patient fails validation (e.g. unknown status)
    """
    raw = store.get_patient(patient_id)
    try:
        return Patient.model_validate(raw)
    except ValidationError as exc:
        logger.warning(f"Stored patient {patient_id} failed validation: {exc}")
        raise DataIntegrityError(f"Stored patient {patient_id} is invalid: {exc}") from exc


def load_vitals_series(patient_id: str, window: Union[TimeWindow, str], store: RecordStore) -> List[VitalSample]:
    """
    Load a patient's vitals series ascending by time (empty when none is stored)

    Timestamps are compared after UTC normalization, so samples written with
    different offsets still come out in chronological order.
    """
    window = TimeWindow(window)
    try:
        samples = [VitalSample.model_validate(sample) for sample in store.get_vitals_series(patient_id, window.value)]
    except ValidationError as exc:
        logger.warning(f"Stored vitals for patient {patient_id} failed validation: {exc}")
        raise DataIntegrityError(f"Stored vitals for patient {patient_id} are invalid") from exc
    return sorted(samples, key=lambda sample: sample.timestamp)


async def build_patient_dashboard(
    patient_id: str,
    window: Union[TimeWindow, str],
    store: RecordStore,
    now: Optional[datetime] = None,
) -> PatientDashboard:
    """
    Build the dashboard for one patient and vitals window

    The patient, association and vitals lookups target disjoint data and run
    concurrently in worker threads; composition starts once all have finished.
    If the patient is unknown, PatientNotFoundError propagates and no partial
    dashboard is produced.
    """
    window = TimeWindow(window)
    logger.debug(f"Building dashboard for patient {patient_id} window={window.value}")

    patient, joined, vitals = await asyncio.gather(
        asyncio.to_thread(load_patient, patient_id, store),
        asyncio.to_thread(join_patient_records, patient_id, store),
        asyncio.to_thread(load_vitals_series, patient_id, window, store),
    )

    return compose_view_model(patient, joined, vitals, window, now=now)
