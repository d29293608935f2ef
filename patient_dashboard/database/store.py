from typing import Any, Dict, List, Protocol


class RecordStore(Protocol):
    """Read-only interface the dashboard services depend on.

    Every association lookup returns an ordered list of raw records and an
    empty list when the patient has none. Only ``get_patient`` can fail.
    """

    def get_patient(self, patient_id: str) -> Dict[str, Any]:
        """Return the stored patient; raise PatientNotFoundError if unknown."""
        ...

    def get_medications_for(self, patient_id: str) -> List[Dict[str, Any]]:
        ...

    def get_records_for(self, patient_id: str) -> List[Dict[str, Any]]:
        ...

    def get_appointments_for(self, patient_id: str) -> List[Dict[str, Any]]:
        ...

    def get_notes_for(self, patient_id: str) -> List[Dict[str, Any]]:
        ...

    def get_vitals_series(self, patient_id: str, window: str) -> List[Dict[str, Any]]:
        """Return the stored vitals samples (any order); may be empty."""
        ...
