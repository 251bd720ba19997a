# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record and auth request/response schemas
# - appointment.py: Appointment booking schemas
# - contact.py: Contact message schemas
# - newsletter.py: Newsletter subscription schemas
# - notification.py: Notification task tracking
# - stats.py: Admin summary
#
# These models define the "contract" between API and clients.
# =============================================================================

from .base import CamelModel, MessageResponse, utcnow
from .user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    User,
    UserPublic,
)
from .appointment import Appointment, AppointmentRequest
from .contact import ContactMessage, ContactRequest
from .newsletter import NewsletterRequest, NewsletterSubscription
from .notification import NotificationKind, NotificationStatus, NotificationTask
from .stats import StatsResponse

__all__ = [
    # Base
    "CamelModel",
    "MessageResponse",
    "utcnow",
    # User
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "User",
    "UserPublic",
    # Bookings
    "Appointment",
    "AppointmentRequest",
    "ContactMessage",
    "ContactRequest",
    "NewsletterRequest",
    "NewsletterSubscription",
    # Notifications
    "NotificationKind",
    "NotificationStatus",
    "NotificationTask",
    # Admin
    "StatsResponse",
]
