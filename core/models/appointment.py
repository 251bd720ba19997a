# =============================================================================
# core/models/appointment.py - Appointment Schemas
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import CamelModel, utcnow


class AppointmentRequest(CamelModel):
    """
    Body of POST /api/appointments.

    Example:
        {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "service": "massage",
            "date": "2024-06-01",
            "time": "10:00",
            "message": "First visit"
        }
    """
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    service: str | None = None
    date: str | None = None
    time: str | None = None
    message: str | None = None


class Appointment(CamelModel):
    """A booked appointment. Immutable once stored; not linked to any User."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    service: str
    date: str
    time: str
    # Empty string when the booker left no message
    message: str = ""
    created_at: datetime = Field(default_factory=utcnow)

    model_config = {"frozen": True}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
