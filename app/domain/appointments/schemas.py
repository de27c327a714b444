"""Appointment domain schemas - Pydantic models for validation"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from ...models import AppointmentStatus


def parse_appointment_status(value: str) -> AppointmentStatus:
    """
    Map a status string to AppointmentStatus, ignoring case.

    Raises:
        ValueError: If the value names no known status
    """
    normalized = (value or "").upper()
    try:
        return AppointmentStatus[normalized]
    except KeyError:
        raise ValueError(f"Invalid status: {value}") from None


def to_naive_utc(value: datetime) -> datetime:
    """Store timestamps as naive UTC; offset-aware values are converted, naive ones kept as-is"""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class AppointmentRequest(BaseModel):
    """Schema for booking a new appointment"""

    serviceId: str
    establishmentId: str
    employeeId: str
    startTime: datetime
    endTime: datetime
    status: Optional[AppointmentStatus] = None
    clientNotes: Optional[str] = None

    @field_validator("startTime", "endTime")
    @classmethod
    def normalize_timestamps(cls, v):
        return to_naive_utc(v)

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v):
        if isinstance(v, str):
            return parse_appointment_status(v)
        return v

    @model_validator(mode="after")
    def validate_interval(self):
        if self.endTime <= self.startTime:
            raise ValueError("endTime must be after startTime")
        return self


class AppointmentStatusUpdate(BaseModel):
    """Schema for changing an appointment's status (parsed by the service)"""

    status: str


class AppointmentResponse(BaseModel):
    """Schema for appointment response"""

    id: str
    clientId: str
    clientName: Optional[str] = None
    serviceId: Optional[str] = None
    serviceName: Optional[str] = None
    establishmentId: str
    employeeId: str
    employeeName: Optional[str] = None
    startTime: datetime
    endTime: datetime
    status: AppointmentStatus
    clientNotes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @classmethod
    def from_appointment(cls, appointment) -> "AppointmentResponse":
        return cls(
            id=appointment.id,
            clientId=appointment.client_id,
            clientName=appointment.client.name if appointment.client else None,
            serviceId=appointment.service_id,
            serviceName=appointment.service.name if appointment.service else None,
            establishmentId=appointment.establishment_id,
            employeeId=appointment.employee_id,
            employeeName=appointment.employee.name if appointment.employee else None,
            startTime=appointment.start_time,
            endTime=appointment.end_time,
            status=appointment.status,
            clientNotes=appointment.client_notes,
            created_at=appointment.created_at,
        )
