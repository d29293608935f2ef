"""
Utility functions for API endpoints
"""
from typing import Optional

from fastapi import Request

from patient_dashboard.core import config
from patient_dashboard.database.storage import JsonRecordStore
from patient_dashboard.database.store import RecordStore


def get_session_key(request: Request) -> Optional[str]:
    """
    Extract the dashboard session key from the X-Device-ID header

    Requests without the header are treated as independent sessions.
    """
    device_id = request.headers.get('X-Device-ID', '').strip()
    return device_id or None


def get_record_store() -> RecordStore:
    """
    Record store dependency (overridden in tests)
    """
    return JsonRecordStore(config.DATA_DIR)
