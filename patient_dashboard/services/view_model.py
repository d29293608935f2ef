"""
Dashboard view model composition

Turns a patient, its joined records and a vitals series into the
render-ready PatientDashboard. Pure functions only; no store access.
"""
from datetime import date, datetime
from typing import Dict, List, Optional, TypeVar, Union

from patient_dashboard.core import config
from patient_dashboard.core.errors import DataIntegrityError
from patient_dashboard.database.schemas import (
    Appointment,
    ClinicalNote,
    JoinedRecords,
    MedicalRecord,
    Patient,
    PatientDashboard,
    PatientStatus,
    TimeWindow,
    VitalReading,
    VitalSample,
    as_naive_utc,
)

PATIENT_ID_WIDTH = 6

DatedEntry = TypeVar("DatedEntry", MedicalRecord, Appointment, ClinicalNote)

STATUS_BADGE_CLASSES: Dict[PatientStatus, str] = {
    PatientStatus.STABLE: "bg-green-50 text-green-700 border-green-100",
    PatientStatus.CRITICAL: "bg-red-50 text-red-700 border-red-100",
    PatientStatus.RECOVERING: "bg-amber-50 text-amber-700 border-amber-100",
}


def resolve_status_class(status: Union[PatientStatus, str]) -> str:
    """
    Map a patient status to its badge style class

    Raises:
        DataIntegrityError: status is not Stable, Critical or Recovering
    """
    try:
        return STATUS_BADGE_CLASSES[PatientStatus(status)]
    except ValueError as exc:
        raise DataIntegrityError(f"Unrecognized patient status: {status!r}") from exc


def format_patient_id(patient_id: str, width: int = PATIENT_ID_WIDTH) -> str:
    """
    Left-pad an identifier with zeros for display ("7" -> "000007")
    """
    return str(patient_id).rjust(width, "0")


def format_display_date(value: Union[datetime, date]) -> str:
    """
    Format a date as e.g. "Jan 10, 2024"
    """
    return f"{value:%b} {value.day}, {value.year}"


def filter_vitals_window(
    samples: List[VitalSample],
    window: Union[TimeWindow, str],
    now: Optional[datetime] = None,
) -> List[VitalSample]:
    """
    Keep the samples that fall within [anchor - window, anchor], ascending by time

    The anchor is `now` when given (offset-aware values are read in UTC),
    otherwise the latest sample's timestamp.
    """
    if not samples:
        return []
    ordered = sorted(samples, key=lambda sample: sample.timestamp)
    anchor = as_naive_utc(now) if now is not None else ordered[-1].timestamp
    start = anchor - TimeWindow(window).duration
    return [sample for sample in ordered if start <= sample.timestamp <= anchor]


def _heart_rate_trend(bpm: float) -> str:
    if bpm < 60:
        return "Low"
    if bpm > 100:
        return "High"
    return "Normal"


def _blood_pressure_trend(systolic: float) -> str:
    if systolic < 120:
        return "Optimal"
    if systolic < 130:
        return "Elevated"
    return "High"


def _temperature_trend(celsius: float) -> str:
    if celsius < 36.1:
        return "Low"
    if celsius > 37.5:
        return "Fever"
    return "Normal"


def _oxygen_trend(percent: float) -> str:
    if percent >= 95:
        return "Good"
    if percent >= 90:
        return "Low"
    return "Critical"


def build_current_vitals(samples: List[VitalSample]) -> List[VitalReading]:
    """
    Build the four current-vitals cards from the most recent sample
    """
    if not samples:
        return []
    latest = max(samples, key=lambda sample: sample.timestamp)
    return [
        VitalReading(label="Heart Rate", value=f"{latest.heart_rate:g}", unit="BPM",
                     trend=_heart_rate_trend(latest.heart_rate)),
        VitalReading(label="Blood Pressure", value=f"{latest.blood_pressure:g}", unit="mmHg",
                     trend=_blood_pressure_trend(latest.blood_pressure)),
        VitalReading(label="Temperature", value=f"{latest.temperature:.1f}", unit="°C",
                     trend=_temperature_trend(latest.temperature)),
        VitalReading(label="Oxygen Level", value=f"{latest.oxygen_level:g}", unit="%",
                     trend=_oxygen_trend(latest.oxygen_level)),
    ]


# Stand-ins for patients whose store has no appointment / note collection yet

def synthesize_appointments(patient: Patient) -> List[Appointment]:
    return [
        Appointment(
            date=patient.next_appointment,
            time=config.DEFAULT_APPOINTMENT_TIME,
            type=config.DEFAULT_APPOINTMENT_TYPE,
            doctor=config.DEFAULT_PHYSICIAN,
        )
    ]


def synthesize_notes(patient: Patient) -> List[ClinicalNote]:
    status = PatientStatus(patient.status).value.lower()
    return [
        ClinicalNote(
            date=patient.last_visit,
            doctor=config.DEFAULT_PHYSICIAN,
            note=f"Patient {status}. {patient.condition} being monitored.",
        )
    ]


def _with_formatted_date(items: List[DatedEntry]) -> List[DatedEntry]:
    return [item.model_copy(update={"formatted_date": format_display_date(item.date)}) for item in items]


def compose_view_model(
    patient: Patient,
    joined: JoinedRecords,
    vitals: List[VitalSample],
    window: Union[TimeWindow, str] = TimeWindow.LAST_24_HOURS,
    now: Optional[datetime] = None,
) -> PatientDashboard:
    """
    Compose the patient dashboard view model

    Args:
        patient: Patient summary from the store
        joined: Medications, documents, appointments and notes for the patient
        vitals: Vitals series (any order, may be empty)
        window: Vitals window to apply (24h, 7d or 30d)
        now: Window anchor; defaults to the latest sample's time

    Returns:
        PatientDashboard ready for rendering

    Raises:
        DataIntegrityError: patient status outside the enumerated values
    """
    window = TimeWindow(window)
    status_class = resolve_status_class(patient.status)
    windowed = filter_vitals_window(vitals, window, now=now)

    appointments = joined.appointments or synthesize_appointments(patient)
    notes = joined.notes or synthesize_notes(patient)

    return PatientDashboard(
        patient_id=patient.id,
        display_id=format_patient_id(patient.id),
        name=patient.name,
        age=patient.age,
        gender=patient.gender,
        image=patient.image,
        condition=patient.condition,
        blood_type=patient.blood_type or config.MISSING_VALUE_PLACEHOLDER,
        status=patient.status,
        status_class=status_class,
        last_visit=format_display_date(patient.last_visit),
        next_appointment=format_display_date(patient.next_appointment),
        time_window=window,
        current_vitals=build_current_vitals(windowed),
        vitals=windowed,
        medications=list(joined.medications),
        records=_with_formatted_date(joined.records),
        appointments=_with_formatted_date(appointments),
        notes=_with_formatted_date(notes),
    )
