"""
Database module

Contains data models (schemas), the record store interface and its JSON
file implementation.
"""

# Export schemas
from patient_dashboard.database.schemas import (
    Patient,
    PatientStatus,
    TimeWindow,
    Medication,
    MedicalRecord,
    Appointment,
    ClinicalNote,
    VitalSample,
    VitalReading,
    JoinedRecords,
    PatientDashboard,
)

# Export storage
from patient_dashboard.database.store import RecordStore
from patient_dashboard.database.storage import (
    read_json,
    write_json,
    JsonRecordStore,
)
from patient_dashboard.database.seed import seed_demo_data

__all__ = [
    # Schemas
    "Patient",
    "PatientStatus",
    "TimeWindow",
    "Medication",
    "MedicalRecord",
    "Appointment",
    "ClinicalNote",
    "VitalSample",
    "VitalReading",
    "JoinedRecords",
    "PatientDashboard",
    # Storage
    "RecordStore",
    "read_json",
    "write_json",
    "JsonRecordStore",
    "seed_demo_data",
]
