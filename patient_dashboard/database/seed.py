"""
Demo data seeding

Writes a small set of sample patients and their associations into a
JsonRecordStore so the dashboard can be exercised without a real backend.
"""
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from patient_dashboard.database.storage import (
    JsonRecordStore,
    MEDICATIONS_FILE,
    RECORDS_FILE,
)

logger = logging.getLogger(__name__)

DEMO_PATIENTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Sarah Johnson",
        "age": 45,
        "gender": "Female",
        "image": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=150",
        "condition": "Hypertension",
        "status": "Stable",
        "last_visit": "2024-03-10",
        "next_appointment": "2024-03-24",
        "blood_type": "A+",
    },
    {
        "id": "2",
        "name": "Michael Chen",
        "age": 62,
        "gender": "Male",
        "image": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=150",
        "condition": "Type 2 Diabetes",
        "status": "Recovering",
        "last_visit": "2024-03-12",
        "next_appointment": "2024-03-26",
    },
    {
        "id": "3",
        "name": "Emma Wilson",
        "age": 34,
        "gender": "Female",
        "image": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=150",
        "condition": "Pneumonia",
        "status": "Critical",
        "last_visit": "2024-03-14",
        "next_appointment": "2024-03-16",
    },
]

DEMO_MEDICATIONS: Dict[str, List[Dict[str, Any]]] = {
    "1": [
        {"id": "m1", "name": "Lisinopril", "dosage": "10mg", "frequency": "Once daily",
         "status": "Active", "prescribed_by": "Dr. Smith"},
        {"id": "m2", "name": "Amlodipine", "dosage": "5mg", "frequency": "Once daily",
         "status": "Active", "prescribed_by": "Dr. Smith"},
    ],
    "2": [
        {"id": "m3", "name": "Metformin", "dosage": "500mg", "frequency": "Twice daily",
         "status": "Active", "prescribed_by": "Dr. Patel"},
    ],
}

DEMO_RECORDS: Dict[str, List[Dict[str, Any]]] = {
    "1": [
        {"id": "r1", "title": "Blood Pressure Log", "date": "2024-03-10", "type": "Report"},
        {"id": "r2", "title": "Lipid Panel", "date": "2024-02-28", "type": "Lab Report"},
    ],
    "3": [
        {"id": "r3", "title": "Chest X-Ray", "date": "2024-03-14", "type": "Imaging"},
    ],
}

# (time of day, heart rate, systolic BP, temperature, oxygen level)
DEMO_VITALS = [
    ("08:00", 72, 120, 37.1, 98),
    ("10:00", 75, 122, 37.0, 97),
    ("12:00", 78, 125, 37.2, 98),
    ("14:00", 73, 118, 37.1, 99),
    ("16:00", 70, 115, 37.0, 98),
]


def build_vitals_series(day: datetime) -> List[Dict[str, Any]]:
    """
    Expand DEMO_VITALS into timestamped samples on the given day
    """
    samples = []
    for label, heart_rate, blood_pressure, temperature, oxygen_level in DEMO_VITALS:
        hour, minute = (int(part) for part in label.split(":"))
        timestamp = day.replace(hour=hour, minute=minute, second=0, microsecond=0)
        samples.append({
            "timestamp": timestamp.isoformat(),
            "heart_rate": heart_rate,
            "blood_pressure": blood_pressure,
            "temperature": temperature,
            "oxygen_level": oxygen_level,
        })
    return samples


def seed_demo_data(data_dir: Union[str, Path], day: Optional[datetime] = None) -> JsonRecordStore:
    """
    Write demo patients, medications, documents and vitals into data_dir

    Args:
        data_dir: Root directory of the JSON record store
        day: Day the demo vitals are stamped with (defaults to yesterday)

    Returns:
        JsonRecordStore over the seeded directory
    """
    if day is None:
        day = datetime.now() - timedelta(days=1)

    store = JsonRecordStore(data_dir)
    store.save_patients(DEMO_PATIENTS)
    store.save_association(MEDICATIONS_FILE, DEMO_MEDICATIONS)
    store.save_association(RECORDS_FILE, DEMO_RECORDS)
    for patient in DEMO_PATIENTS:
        store.save_vitals_series(patient["id"], build_vitals_series(day))

    logger.info(f"Seeded {len(DEMO_PATIENTS)} demo patients into {store.data_dir}")
    return store
