# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .appointment_service import AppointmentService
from .contact_service import ContactService
from .newsletter_service import NewsletterService
from .notification_service import NotificationService
from .admin_service import AdminService

__all__ = [
    "UserService",
    "AppointmentService",
    "ContactService",
    "NewsletterService",
    "NotificationService",
    "AdminService",
]
