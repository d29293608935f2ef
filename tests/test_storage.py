"""
JSON record store tests
"""
import json
from datetime import datetime
from pathlib import Path

import pytest

from patient_dashboard.core.errors import DataIntegrityError, PatientNotFoundError
from patient_dashboard.database.storage import (
    MEDICATIONS_FILE,
    PATIENTS_FILE,
    VITALS_DIR,
    read_json,
    write_json,
)
from patient_dashboard.services.dashboard import load_vitals_series


def test_read_json_missing_file(temp_data_dir):
    assert read_json(Path(temp_data_dir) / "nope.json") == []
    assert read_json(Path(temp_data_dir) / "nope.json", default={}) == {}


def test_read_json_corrupt_file(temp_data_dir):
    path = Path(temp_data_dir) / "broken.json"
    path.write_text("{not json")
    assert read_json(path) == []


def test_write_json_creates_directories(temp_data_dir):
    path = Path(temp_data_dir) / "nested" / "dir" / "data.json"
    write_json(path, [{"id": "1"}])
    assert json.loads(path.read_text()) == [{"id": "1"}]


def test_empty_store_has_no_associations(empty_store):
    assert empty_store.get_medications_for("1") == []
    assert empty_store.get_records_for("1") == []
    assert empty_store.get_appointments_for("1") == []
    assert empty_store.get_notes_for("1") == []
    assert empty_store.get_vitals_series("1", "24h") == []


def test_empty_store_patient_not_found(empty_store):
    with pytest.raises(PatientNotFoundError) as exc_info:
        empty_store.get_patient("1")
    assert exc_info.value.patient_id == "1"


def test_seeded_store(store):
    assert store.get_patient("1")["name"] == "Sarah Johnson"
    assert [m["name"] for m in store.get_medications_for("1")] == ["Lisinopril", "Amlodipine"]
    assert store.get_medications_for("3") == []
    assert [r["id"] for r in store.get_records_for("3")] == ["r3"]

    files = {p.name for p in Path(store.data_dir).iterdir()}
    assert {"patients.json", "medications.json", "records.json", "vitals"} <= files


def test_vitals_series_keeps_stored_order(empty_store):
    empty_store.save_vitals_series("1", [
        {"timestamp": "2024-03-15T16:00:00"},
        {"timestamp": "2024-03-15T08:00:00"},
        {"timestamp": "2024-03-15T12:00:00"},
    ])
    series = empty_store.get_vitals_series("1", "24h")
    assert [s["timestamp"][-8:-3] for s in series] == ["16:00", "08:00", "12:00"]


def test_loaded_vitals_ordered_across_utc_offsets(empty_store):
    """10:00+02:00 is 08:00 UTC and must sort before 09:00 UTC"""
    reading = {"heart_rate": 72, "blood_pressure": 120, "temperature": 37.0, "oxygen_level": 98}
    empty_store.save_vitals_series("1", [
        {**reading, "timestamp": "2024-03-15T09:00:00+00:00"},
        {**reading, "timestamp": "2024-03-15T10:00:00+02:00"},
    ])
    series = load_vitals_series("1", "24h", empty_store)
    assert [s.timestamp for s in series] == [datetime(2024, 3, 15, 8), datetime(2024, 3, 15, 9)]
    assert [s.time for s in series] == ["08:00", "09:00"]


def test_non_mapping_association_file_reads_empty(empty_store):
    empty_store.save_association(MEDICATIONS_FILE, [{"id": "m1"}])
    assert empty_store.get_medications_for("1") == []


def test_vitals_file_of_wrong_shape_reads_empty(empty_store):
    write_json(Path(empty_store.data_dir) / VITALS_DIR / "1.json", {"timestamp": "2024-03-15T08:00:00"})
    assert empty_store.get_vitals_series("1", "24h") == []
    assert load_vitals_series("1", "24h", empty_store) == []


def test_vitals_entry_of_wrong_shape_is_integrity_error(empty_store):
    empty_store.save_vitals_series("1", ["2024-03-15T08:00:00"])
    with pytest.raises(DataIntegrityError):
        load_vitals_series("1", "24h", empty_store)


def test_patients_file_of_wrong_shape_means_not_found(empty_store, sample_patient):
    write_json(Path(empty_store.data_dir) / PATIENTS_FILE, {"42": sample_patient})
    with pytest.raises(PatientNotFoundError):
        empty_store.get_patient("42")


def test_non_object_patient_entries_are_skipped(empty_store, sample_patient):
    empty_store.save_patients(["42", None, sample_patient])
    assert empty_store.get_patient("42")["name"] == "Alex Rivera"
