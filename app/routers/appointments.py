# =============================================================================
# app/routers/appointments.py - Appointment Booking Endpoint
# =============================================================================

import logging

from fastapi import APIRouter, BackgroundTasks

from app.dependencies import ContextDep
from app.exceptions import internal_errors
from core.models import AppointmentRequest, MessageResponse, NotificationKind

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=MessageResponse)
async def book_appointment(
    background_tasks: BackgroundTasks,
    context: ContextDep,
    body: AppointmentRequest | None = None,
) -> MessageResponse:
    """
    Book an appointment and queue a confirmation email to the booker.

    The email is sent after the response; its outcome never changes the
    response.

    Raises:
        400: A required field is missing or the email is malformed
    """
    body = body or AppointmentRequest()
    with internal_errors("Failed to book appointment"):
        appointment = context.appointment_service.book(body)
        task = context.notification_service.notify(NotificationKind.APPOINTMENT, appointment)
        background_tasks.add_task(context.notification_service.deliver, task.id)
        logger.debug(f"Queued notification {task.id} for appointment {appointment.id}")

    return MessageResponse(
        message="Appointment booked successfully! Check your email for confirmation."
    )
