# =============================================================================
# core/services/appointment_service.py - Appointment Booking
# =============================================================================

import logging

from app.exceptions import FieldValidationError
from core.models.appointment import Appointment, AppointmentRequest
from core.repositories import Repository
from lib.ids import MonotonicIdGenerator
from lib.validation import is_valid_email, missing_fields, normalize_email

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = [
    "first_name",
    "last_name",
    "email",
    "phone",
    "service",
    "date",
    "time",
]


class AppointmentService:
    """Validates and stores appointment bookings."""

    def __init__(self, appointments: Repository[Appointment], ids: MonotonicIdGenerator):
        self.appointments = appointments
        self.ids = ids

    def book(self, request: AppointmentRequest) -> Appointment:
        """
        Store a new appointment.

        Raises:
            FieldValidationError: A required field is missing or the email is malformed
        """
        fields = request.model_dump()
        if missing_fields(fields, REQUIRED_FIELDS):
            raise FieldValidationError("All required fields must be filled")

        if not is_valid_email(request.email):
            raise FieldValidationError("Invalid email format")

        appointment = Appointment(
            id=self.ids.next_id(),
            first_name=request.first_name,
            last_name=request.last_name,
            email=normalize_email(request.email),
            phone=request.phone,
            service=request.service,
            date=request.date,
            time=request.time,
            message=request.message or "",
        )
        self.appointments.append(appointment)

        logger.info(
            f"Appointment booked: {appointment.full_name} - {appointment.service} "
            f"on {appointment.date} at {appointment.time}"
        )
        return appointment
