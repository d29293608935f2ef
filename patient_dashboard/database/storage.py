"""
Simple JSON file storage

- Using JSON files for MVP/demo to avoid database setup complexity
- Association files map patient_id -> ordered list of child records
- No caching: every dashboard build reads fresh data
- Easy to migrate to SQL/NoSQL later by implementing the RecordStore protocol
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from patient_dashboard.core.errors import PatientNotFoundError

logger = logging.getLogger(__name__)

PATIENTS_FILE = "patients.json"
MEDICATIONS_FILE = "medications.json"
RECORDS_FILE = "records.json"
APPOINTMENTS_FILE = "appointments.json"
NOTES_FILE = "notes.json"
VITALS_DIR = "vitals"


def read_json(filepath: Union[str, Path], default: Any = None) -> Any:
    """
    Read JSON file, return default (empty list) if missing or corrupt
    """
    if default is None:
        default = []
    path = Path(filepath)
    try:
        with open(path, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring unreadable JSON file {path}: {e}")
        return default


def write_json(filepath: Union[str, Path], data: Any):
    """
    Write data to JSON file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)


class JsonRecordStore:
    """
    RecordStore backed by JSON files under a data directory

    Layout:
        patients.json                  list of patient objects
        medications.json               {patient_id: [medication, ...]}
        records.json                   {patient_id: [document, ...]}
        appointments.json              {patient_id: [appointment, ...]}
        notes.json                     {patient_id: [note, ...]}
        vitals/<patient_id>.json       [sample, ...]
    """
    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def _association(self, filename: str, patient_id: str) -> List[Dict[str, Any]]:
        mapping = read_json(self.data_dir / filename, default={})
        if not isinstance(mapping, dict):
            logger.warning(f"{filename} is not a patient_id mapping, treating as empty")
            return []
        return list(mapping.get(patient_id) or [])

    def get_patient(self, patient_id: str) -> Dict[str, Any]:
        patients = read_json(self.data_dir / PATIENTS_FILE)
        if not isinstance(patients, list):
            logger.warning(f"{PATIENTS_FILE} is not a list of patients, treating as empty")
            patients = []
        for patient in patients:
            if isinstance(patient, dict) and str(patient.get('id')) == patient_id:
                return patient
        raise PatientNotFoundError(patient_id)

    def get_medications_for(self, patient_id: str) -> List[Dict[str, Any]]:
        return self._association(MEDICATIONS_FILE, patient_id)

    def get_records_for(self, patient_id: str) -> List[Dict[str, Any]]:
        return self._association(RECORDS_FILE, patient_id)

    def get_appointments_for(self, patient_id: str) -> List[Dict[str, Any]]:
        return self._association(APPOINTMENTS_FILE, patient_id)

    def get_notes_for(self, patient_id: str) -> List[Dict[str, Any]]:
        return self._association(NOTES_FILE, patient_id)

    def get_vitals_series(self, patient_id: str, window: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Get the stored vitals series for a patient, in stored order

        Raw timestamps may carry different UTC offsets, so ordering is done on
        parsed values by load_vitals_series. The JSON store keeps the full
        history; window filtering happens in the dashboard composer, so `window`
        is accepted only for interface parity.
        """
        samples = read_json(self.data_dir / VITALS_DIR / f"{patient_id}.json")
        if not isinstance(samples, list):
            logger.warning(f"Vitals file for patient {patient_id} is not a list of samples, treating as empty")
            return []
        return samples

    # Write helpers used by the demo seed and tests
    def save_patients(self, patients: List[Dict[str, Any]]):
        write_json(self.data_dir / PATIENTS_FILE, patients)

    def save_association(self, filename: str, mapping: Dict[str, List[Dict[str, Any]]]):
        write_json(self.data_dir / filename, mapping)

    def save_vitals_series(self, patient_id: str, samples: List[Dict[str, Any]]):
        write_json(self.data_dir / VITALS_DIR / f"{patient_id}.json", samples)
