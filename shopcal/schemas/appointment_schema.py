"""Appointment data models."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AppointmentStatus(str, Enum):
    """Lifecycle states of an appointment."""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class Appointment(BaseModel):
    """A booked appointment, optionally carrying display names for its references."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    client_id: str
    service_id: str
    start_time: datetime
    end_time: datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str = ""
    barber_id: Optional[str] = None
    tenant_id: Optional[str] = None
    client_name: Optional[str] = None
    service_name: Optional[str] = None
    service_price: Optional[Decimal] = None


class AppointmentDraft(BaseModel):
    """Values collected by the new-appointment form."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    client_id: str = ""
    service_id: str = ""
    day: date
    time: str = Field(default="10:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    notes: str = ""

    def start_datetime(self) -> datetime:
        hour, minute = (int(part) for part in self.time.split(":"))
        return datetime(self.day.year, self.day.month, self.day.day, hour, minute)


class AppointmentUpdate(BaseModel):
    """Partial edit of an existing appointment. Unset fields are left alone."""

    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True, mode="json")


class AppointmentCreate(BaseModel):
    """Payload sent to the store to book an appointment."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    client_id: str
    service_id: str
    start_time: datetime
    end_time: datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str = ""
    barber_id: str
    tenant_id: str


class AppointmentQuery(BaseModel):
    """Filter for listing appointments within a tenant and barber scope."""

    owner_id: str
    tenant_id: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    client_id: Optional[str] = None

    def matches(self, appointment: Appointment) -> bool:
        if appointment.barber_id is not None and appointment.barber_id != self.owner_id:
            return False
        if appointment.tenant_id is not None and appointment.tenant_id != self.tenant_id:
            return False
        if self.start is not None and appointment.start_time < self.start:
            return False
        if self.end is not None and appointment.start_time > self.end:
            return False
        if self.status is not None and appointment.status != self.status:
            return False
        if self.client_id is not None and appointment.client_id != self.client_id:
            return False
        return True
