# =============================================================================
# core/models/notification.py - Notification Task Schemas
# =============================================================================
# A NotificationTask is the observable record of one email attempt.
#
# Lifecycle:
#   pending -> sent     (SMTP accepted the message)
#   pending -> logged   (email not configured, content written to the log)
#   pending -> failed   (transport error; `error` holds the reason)
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import Field

from .base import CamelModel, utcnow


class NotificationKind(str, Enum):
    APPOINTMENT = "appointment"
    CONTACT = "contact"


class NotificationStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    LOGGED = "logged"
    FAILED = "failed"

    @property
    def is_final(self) -> bool:
        return self is not NotificationStatus.PENDING


class NotificationTask(CamelModel):
    id: str = Field(..., description="Opaque task id")
    kind: NotificationKind
    recipient: str | None = Field(
        default=None,
        description="Destination address (None when no admin address is configured)"
    )
    subject: str
    status: NotificationStatus = NotificationStatus.PENDING
    error: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    completed_at: datetime | None = None
