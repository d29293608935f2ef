"""
Patient read endpoints

Read-only projections of the record store for a single patient.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from patient_dashboard.core import config
from patient_dashboard.core.errors import DataIntegrityError, PatientNotFoundError
from patient_dashboard.database.schemas import MedicalRecord, Medication, Patient, TimeWindow, VitalSample
from patient_dashboard.database.store import RecordStore
from patient_dashboard.api.utils import get_record_store
from patient_dashboard.services.dashboard import load_patient, load_vitals_series
from patient_dashboard.services.records import join_patient_records
from patient_dashboard.services.view_model import filter_vitals_window

router = APIRouter()


def _require_patient(patient_id: str, store: RecordStore) -> Patient:
    try:
        return load_patient(patient_id, store)
    except PatientNotFoundError:
        raise HTTPException(status_code=404, detail=f"No patient found with id {patient_id}")
    except DataIntegrityError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/patients/{patient_id}", response_model=Patient)
async def get_patient(patient_id: str, store: RecordStore = Depends(get_record_store)):
    """
    Get a patient's demographic and status summary

    Returns 404 if the identifier does not resolve.
    """
    return _require_patient(patient_id, store)


@router.get("/patients/{patient_id}/medications", response_model=List[Medication])
async def get_patient_medications(patient_id: str, store: RecordStore = Depends(get_record_store)):
    """
    Get current medications (empty list when none are recorded)
    """
    _require_patient(patient_id, store)
    try:
        return join_patient_records(patient_id, store).medications
    except DataIntegrityError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/patients/{patient_id}/records", response_model=List[MedicalRecord])
async def get_patient_records(patient_id: str, store: RecordStore = Depends(get_record_store)):
    """
    Get patient documents in stored order (empty list when none are recorded)
    """
    _require_patient(patient_id, store)
    try:
        return join_patient_records(patient_id, store).records
    except DataIntegrityError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/patients/{patient_id}/vitals", response_model=List[VitalSample])
async def get_patient_vitals(
    patient_id: str,
    window: TimeWindow = TimeWindow(config.DEFAULT_TIME_WINDOW),
    store: RecordStore = Depends(get_record_store),
):
    """
    Get the vitals series for the selected window, ascending by time
    """
    _require_patient(patient_id, store)
    try:
        samples = load_vitals_series(patient_id, window, store)
    except DataIntegrityError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return filter_vitals_window(samples, window)
