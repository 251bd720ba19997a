# =============================================================================
# app/routers/contact.py - Contact Form Endpoint
# =============================================================================

import logging

from fastapi import APIRouter, BackgroundTasks

from app.dependencies import ContextDep
from app.exceptions import internal_errors
from core.models import ContactRequest, MessageResponse, NotificationKind

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=MessageResponse)
async def submit_contact(
    background_tasks: BackgroundTasks,
    context: ContextDep,
    body: ContactRequest | None = None,
) -> MessageResponse:
    """
    Store a contact message and queue a notice to the admin address.

    Raises:
        400: Missing field or malformed email
    """
    body = body or ContactRequest()
    with internal_errors("Failed to send message"):
        contact = context.contact_service.submit(body)
        task = context.notification_service.notify(NotificationKind.CONTACT, contact)
        background_tasks.add_task(context.notification_service.deliver, task.id)
        logger.debug(f"Queued notification {task.id} for contact message {contact.id}")

    return MessageResponse(message="Message sent successfully! We'll get back to you soon.")
