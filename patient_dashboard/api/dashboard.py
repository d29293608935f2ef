"""
Patient dashboard endpoint
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from patient_dashboard.core import config
from patient_dashboard.core.errors import (
    ActivationSupersededError,
    DataIntegrityError,
    PatientNotFoundError,
)
from patient_dashboard.database.schemas import PatientDashboard, TimeWindow
from patient_dashboard.database.store import RecordStore
from patient_dashboard.api.utils import get_record_store, get_session_key
from patient_dashboard.services.activation import get_activation_registry
from patient_dashboard.services.dashboard import build_patient_dashboard

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/patients/{patient_id}/dashboard", response_model=PatientDashboard)
async def get_patient_dashboard(
    patient_id: str,
    request: Request,
    window: TimeWindow = TimeWindow(config.DEFAULT_TIME_WINDOW),
    store: RecordStore = Depends(get_record_store),
):
    """
    Get the composed dashboard for a patient

    - 404 if the patient does not exist (no partial dashboard is returned)
    - 409 if a newer dashboard request from the same X-Device-ID replaced this one
    - 500 if stored patient data is invalid (e.g. unrecognized status)
    """
    registry = get_activation_registry()
    session_key = get_session_key(request)

    try:
        return await registry.run(
            session_key,
            lambda: build_patient_dashboard(patient_id, window, store),
        )
    except PatientNotFoundError:
        raise HTTPException(status_code=404, detail=f"No patient found with id {patient_id}")
    except DataIntegrityError as e:
        logger.error(f"Dashboard for patient {patient_id} failed integrity checks: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except ActivationSupersededError:
        raise HTTPException(
            status_code=409,
            detail="Dashboard request superseded by a newer request from the same device",
        )
