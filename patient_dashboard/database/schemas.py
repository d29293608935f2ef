"""
Dashboard data models

- Stored entities (patient, medications, documents, vitals, appointments, notes)
- Closed enums for patient status and vitals time window
- Composed PatientDashboard view model returned to the rendering layer
- Pydantic provides automatic validation
"""
from typing import Optional, List, Union
from datetime import datetime, date, timedelta, timezone
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, computed_field, field_validator


# Stores may hold full timestamps or bare dates
DateLike = Union[datetime, date]


def as_naive_utc(value: datetime) -> datetime:
    """
    Convert an offset-aware datetime to naive UTC; naive values are taken as UTC already
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class PatientStatus(str, Enum):
    """
    Clinical status shown as a badge on the dashboard
    """
    STABLE = "Stable"
    CRITICAL = "Critical"
    RECOVERING = "Recovering"


class TimeWindow(str, Enum):
    """
    Selectable vitals history window
    """
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"

    @property
    def duration(self) -> timedelta:
        return _WINDOW_DURATIONS[self]


_WINDOW_DURATIONS = {
    TimeWindow.LAST_24_HOURS: timedelta(hours=24),
    TimeWindow.LAST_7_DAYS: timedelta(days=7),
    TimeWindow.LAST_30_DAYS: timedelta(days=30),
}


class Patient(BaseModel):
    """
    Patient demographic and status summary

    Owned by the record store; treated as immutable for one dashboard build.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)
    id: str                                    = Field(...,  min_length=1, description="Opaque patient identifier (join key for all associations)")
    name: str                                  = Field(...,  description="Patient display name")
    age: int                                   = Field(...,  gt=0, description="Age in years")
    gender: str                                = Field(...,  description="Gender as recorded")
    image: Optional[str]                       = Field(None, description="Profile image URL")
    condition: str                             = Field(...,  description="Primary condition (free text)")
    status: PatientStatus                      = Field(...,  description="Clinical status: Stable, Critical or Recovering")
    last_visit: DateLike                       = Field(...,  description="Timestamp of the last visit")
    next_appointment: DateLike                 = Field(...,  description="Timestamp of the next scheduled appointment")
    blood_type: Optional[str]                  = Field(None, description="ABO/Rh blood type, if known")


class Medication(BaseModel):
    """
    Active medication associated with exactly one patient
    """
    model_config = ConfigDict(extra="ignore")
    id: str                 = Field(..., description="Medication entry identifier")
    name: str               = Field(..., description="Drug name")
    dosage: str             = Field(..., description="Dose per administration (e.g. '10mg')")
    frequency: str          = Field(..., description="Administration frequency (e.g. 'Once daily')")
    status: str             = Field(..., description="Prescription status (e.g. 'Active')")
    prescribed_by: str      = Field(..., description="Prescribing physician")


class MedicalRecord(BaseModel):
    """
    Patient document (lab report, imaging, discharge summary...)
    """
    model_config = ConfigDict(extra="ignore")
    id: str                           = Field(...,  description="Document identifier")
    title: str                        = Field(...,  description="Document title")
    date: DateLike                    = Field(...,  description="Document date")
    type: str                         = Field(...,  description="Document type (e.g. 'Lab Report')")
    formatted_date: Optional[str]     = Field(None, description="Display date, filled in by the dashboard composer")


class Appointment(BaseModel):
    """
    Upcoming appointment entry
    """
    model_config = ConfigDict(extra="ignore")
    date: DateLike                    = Field(...,  description="Appointment date")
    time: str                         = Field(...,  description="Time of day label (e.g. '09:00 AM')")
    type: str                         = Field(...,  description="Visit type (e.g. 'Check-up')")
    doctor: str                       = Field(...,  description="Attending physician")
    formatted_date: Optional[str]     = Field(None, description="Display date, filled in by the dashboard composer")


class ClinicalNote(BaseModel):
    """
    Clinical note entry
    """
    model_config = ConfigDict(extra="ignore")
    date: DateLike                    = Field(...,  description="Date the note was written")
    doctor: str                       = Field(...,  description="Authoring physician")
    note: str                         = Field(...,  description="Note text")
    formatted_date: Optional[str]     = Field(None, description="Display date, filled in by the dashboard composer")


class VitalSample(BaseModel):
    """
    One point of the vitals time series
    """
    model_config = ConfigDict(extra="ignore")
    timestamp: datetime      = Field(..., description="Time the sample was taken")
    heart_rate: float        = Field(..., description="Heart rate (BPM)")
    blood_pressure: float    = Field(..., description="Systolic blood pressure (mmHg)")
    temperature: float       = Field(..., description="Body temperature (°C)")
    oxygen_level: float      = Field(..., description="Oxygen saturation (%)")

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value: datetime) -> datetime:
        """Store every timestamp as naive UTC so mixed-offset series compare"""
        return as_naive_utc(value)

    @computed_field
    @property
    def time(self) -> str:
        """Chart axis label"""
        return self.timestamp.strftime("%H:%M")


class VitalReading(BaseModel):
    """
    Current-vitals card derived from the latest sample in the window
    """
    label: str    = Field(..., description="Card title (e.g. 'Heart Rate')")
    value: str    = Field(..., description="Display value")
    unit: str     = Field(..., description="Display unit")
    trend: str    = Field(..., description="Qualitative reading (e.g. 'Normal', 'High')")


class JoinedRecords(BaseModel):
    """
    Child collections joined on a patient identifier
    """
    medications: List[Medication]      = Field(default_factory=list, description="Medications in stored order")
    records: List[MedicalRecord]       = Field(default_factory=list, description="Documents in stored order")
    appointments: List[Appointment]    = Field(default_factory=list, description="Stored appointments, if any")
    notes: List[ClinicalNote]          = Field(default_factory=list, description="Stored clinical notes, if any")


class PatientDashboard(BaseModel):
    """
    Render-ready dashboard view model
    """
    patient_id: str                        = Field(..., description="Underlying patient identifier")
    display_id: str                        = Field(..., description="Identifier zero-padded to 6 characters")
    name: str                              = Field(..., description="Patient display name")
    age: int                               = Field(..., description="Age in years")
    gender: str                            = Field(..., description="Gender as recorded")
    image: Optional[str]                   = Field(None, description="Profile image URL")
    condition: str                         = Field(..., description="Primary condition")
    blood_type: str                        = Field(..., description="Blood type or placeholder")
    status: PatientStatus                  = Field(..., description="Clinical status")
    status_class: str                      = Field(..., description="Style class for the status badge")
    last_visit: str                        = Field(..., description="Formatted last visit date")
    next_appointment: str                  = Field(..., description="Formatted next appointment date")
    time_window: TimeWindow                = Field(..., description="Window applied to the vitals series")
    current_vitals: List[VitalReading]     = Field(default_factory=list, description="Latest vitals cards")
    vitals: List[VitalSample]              = Field(default_factory=list, description="Windowed vitals series, ascending")
    medications: List[Medication]          = Field(default_factory=list, description="Current medications")
    records: List[MedicalRecord]           = Field(default_factory=list, description="Recent documents")
    appointments: List[Appointment]        = Field(default_factory=list, description="Upcoming appointments")
    notes: List[ClinicalNote]              = Field(default_factory=list, description="Clinical notes")
