"""
Domain errors raised by the storage and service layers

API routers translate these into HTTPException responses.
"""


class PatientNotFoundError(LookupError):
    """
    Patient identifier does not resolve in the patient store
    """
    def __init__(self, patient_id: str):
        self.patient_id = patient_id
        super().__init__(f"Patient not found: {patient_id}")


class DataIntegrityError(ValueError):
    """
    Stored patient data violates a schema constraint (e.g. unknown status)
    """


class ActivationSupersededError(Exception):
    """
    A newer dashboard activation from the same session replaced this one
    """
    def __init__(self, session_key: str):
        self.session_key = session_key
        super().__init__(f"Dashboard request superseded for session {session_key}")
