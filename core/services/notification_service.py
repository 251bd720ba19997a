# =============================================================================
# core/services/notification_service.py - Booking and Contact Emails
# =============================================================================
# Two-step, best-effort email dispatch:
#
#   1. notify()  - renders the message and records a pending NotificationTask.
#                  Called inside the request, never blocks.
#   2. deliver() - sends (or logs) the message and records the outcome.
#                  Scheduled as a background task after the response.
#
# A failed delivery only changes the task's status; it never touches the
# stored booking or the HTTP response.
# =============================================================================

import asyncio
import html
import logging
from uuid import uuid4

from app.exceptions import RouteNotFoundError
from core.models.appointment import Appointment
from core.models.base import utcnow
from core.models.contact import ContactMessage
from core.models.notification import (
    NotificationKind,
    NotificationStatus,
    NotificationTask,
)
from lib.mailer import SmtpMailer

logger = logging.getLogger(__name__)

APPOINTMENT_SUBJECT = "🌿 Appointment Confirmation - WellnessHub"
CONTACT_SUBJECT = "📧 New Contact Message - WellnessHub"


# =============================================================================
# Templates
# =============================================================================

def render_appointment_email(appointment: Appointment) -> str:
    """HTML confirmation sent to the person who booked."""
    e = html.escape
    message_block = (
        f"<p><strong>Message:</strong> {e(appointment.message)}</p>"
        if appointment.message else ""
    )
    return f"""
      <h2>🌿 Appointment Confirmation - WellnessHub</h2>
      <p>Dear {e(appointment.first_name)} {e(appointment.last_name)},</p>
      <p>Your appointment has been scheduled successfully!</p>
      <div style="background: #f0f9ff; padding: 15px; border-radius: 8px; margin: 15px 0;">
        <h3>Appointment Details:</h3>
        <ul>
          <li><strong>Service:</strong> {e(appointment.service)}</li>
          <li><strong>Date:</strong> {e(appointment.date)}</li>
          <li><strong>Time:</strong> {e(appointment.time)}</li>
          <li><strong>Phone:</strong> {e(appointment.phone)}</li>
        </ul>
        {message_block}
      </div>
      <p>We'll contact you within 24 hours to confirm your appointment.</p>
      <p>Thank you for choosing WellnessHub!</p>
    """


def render_contact_email(contact: ContactMessage) -> str:
    """HTML notice sent to the site admin."""
    e = html.escape
    received = contact.created_at.strftime("%Y-%m-%d %H:%M:%S %Z")
    return f"""
      <h2>📧 New Contact Message - WellnessHub</h2>
      <div style="background: #f9fafb; padding: 15px; border-radius: 8px;">
        <p><strong>Name:</strong> {e(contact.name)}</p>
        <p><strong>Email:</strong> {e(contact.email)}</p>
        <p><strong>Message:</strong></p>
        <div style="background: white; padding: 10px; border-radius: 4px; margin-top: 10px;">
          {e(contact.message)}
        </div>
        <p><small>Received: {received}</small></p>
      </div>
    """


# =============================================================================
# Service
# =============================================================================

class NotificationService:
    """
    Tracks and performs notification deliveries.

    With no mailer configured every delivery ends as LOGGED.
    """

    def __init__(
        self,
        mailer: SmtpMailer | None = None,
        sender: str | None = None,
        admin_email: str | None = None,
    ):
        self.mailer = mailer
        self.sender = sender
        self.admin_email = admin_email
        self._tasks: dict[str, NotificationTask] = {}
        self._bodies: dict[str, str] = {}

    @property
    def email_enabled(self) -> bool:
        return self.mailer is not None

    def notify(
        self,
        kind: NotificationKind,
        payload: Appointment | ContactMessage,
    ) -> NotificationTask:
        """
        Render a notification and record it as pending.

        Args:
            kind: Which template/recipient to use
            payload: The stored record the email is about

        Returns:
            The pending NotificationTask
        """
        if kind is NotificationKind.APPOINTMENT:
            recipient = payload.email
            subject = APPOINTMENT_SUBJECT
            body = render_appointment_email(payload)
        else:
            recipient = self.admin_email
            subject = CONTACT_SUBJECT
            body = render_contact_email(payload)

        task = NotificationTask(
            id=uuid4().hex,
            kind=kind,
            recipient=recipient,
            subject=subject,
        )
        self._tasks[task.id] = task
        self._bodies[task.id] = body
        return task

    async def deliver(self, task_id: str) -> NotificationTask:
        """
        Send (or log) a pending notification and record the outcome.

        Never raises for transport problems: those end up in the task's
        `error` field with status FAILED.
        """
        task = self.get(task_id)
        if task.status.is_final:
            return task

        body = self._bodies.pop(task_id, "")

        if self.mailer is None:
            logger.info(f"📧 {task.kind.value} email (would be sent to {task.recipient}): {body}")
            return self._finish(task, NotificationStatus.LOGGED)

        if not task.recipient:
            logger.warning(f"Notification {task.id} has no recipient configured")
            return self._finish(task, NotificationStatus.FAILED, error="No recipient configured")

        try:
            await asyncio.to_thread(
                self.mailer.send,
                self.sender or self.mailer.username,
                task.recipient,
                task.subject,
                body,
            )
        except Exception as e:
            logger.error(f"Notification {task.id} to {task.recipient} failed: {e}")
            return self._finish(task, NotificationStatus.FAILED, error=str(e))

        logger.info(f"Notification {task.id} sent to {task.recipient}")
        return self._finish(task, NotificationStatus.SENT)

    def get(self, task_id: str) -> NotificationTask:
        """
        Raises:
            RouteNotFoundError: Unknown task id
        """
        task = self._tasks.get(task_id)
        if task is None:
            raise RouteNotFoundError(f"Notification not found: {task_id}")
        return task

    def list_tasks(self) -> list[NotificationTask]:
        """All tasks, newest first."""
        return list(reversed(self._tasks.values()))

    def pending_ids(self) -> list[str]:
        return [task.id for task in self._tasks.values() if not task.status.is_final]

    def _finish(
        self,
        task: NotificationTask,
        status: NotificationStatus,
        error: str | None = None,
    ) -> NotificationTask:
        finished = task.model_copy(
            update={"status": status, "error": error, "completed_at": utcnow()}
        )
        self._tasks[task.id] = finished
        return finished
