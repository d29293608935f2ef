"""
Shared test fixtures
"""
import shutil
import tempfile
import threading
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from patient_dashboard.api.utils import get_record_store
from patient_dashboard.core.errors import PatientNotFoundError
from patient_dashboard.database.seed import seed_demo_data
from patient_dashboard.database.storage import JsonRecordStore
from patient_dashboard.main import app

SEED_DAY = datetime(2024, 3, 15)


class FakeRecordStore:
    """In-memory RecordStore; lookups can meet at a barrier or wait on a per-patient gate"""

    def __init__(self):
        self.patients = {}
        self.medications = {}
        self.records = {}
        self.appointments = {}
        self.notes = {}
        self.vitals = {}
        self.barrier = None
        self.gates = {}

    def _wait(self):
        if self.barrier is not None:
            self.barrier.wait()

    def get_patient(self, patient_id):
        self._wait()
        gate = self.gates.get(patient_id)
        if gate is not None:
            gate.wait(timeout=5)
        if patient_id not in self.patients:
            raise PatientNotFoundError(patient_id)
        return self.patients[patient_id]

    def get_medications_for(self, patient_id):
        self._wait()
        return list(self.medications.get(patient_id, []))

    def get_records_for(self, patient_id):
        return list(self.records.get(patient_id, []))

    def get_appointments_for(self, patient_id):
        return list(self.appointments.get(patient_id, []))

    def get_notes_for(self, patient_id):
        return list(self.notes.get(patient_id, []))

    def get_vitals_series(self, patient_id, window):
        self._wait()
        return list(self.vitals.get(patient_id, []))

    def require_concurrent_lookups(self, timeout=5):
        # patient, associations and vitals lookups must all be in flight at once
        self.barrier = threading.Barrier(3, timeout=timeout)


@pytest.fixture
def temp_data_dir():
    """Create temporary data directory for tests"""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def store(temp_data_dir):
    """JSON record store seeded with the demo patients"""
    return seed_demo_data(temp_data_dir, day=SEED_DAY)


@pytest.fixture
def empty_store(temp_data_dir):
    """JSON record store over an empty directory"""
    return JsonRecordStore(temp_data_dir)


@pytest.fixture
def fake_store():
    return FakeRecordStore()


@pytest.fixture
def client(store):
    """Test client reading from the seeded temp store"""
    app.dependency_overrides[get_record_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_patient():
    return {
        "id": "42",
        "name": "Alex Rivera",
        "age": 58,
        "gender": "Male",
        "image": "https://example.com/alex.png",
        "condition": "Pneumonia",
        "status": "Critical",
        "last_visit": "2024-01-10",
        "next_appointment": "2024-02-01",
    }
