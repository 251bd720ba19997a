# =============================================================================
# app/context.py - Application Context
# =============================================================================
# Owns every piece of process-scoped state: the stores, the services built on
# them, the token issuer and the start time. One context is created per app
# instance and reached from route handlers through dependency injection.
# =============================================================================

import logging
import time
from dataclasses import dataclass, field
from datetime import timedelta

from app.config import Settings
from core.models import (
    Appointment,
    ContactMessage,
    NewsletterSubscription,
    User,
)
from core.repositories import InMemoryRepository, Repository
from core.services import (
    AdminService,
    AppointmentService,
    ContactService,
    NewsletterService,
    NotificationService,
    UserService,
)
from lib.ids import MonotonicIdGenerator
from lib.mailer import SmtpMailer
from lib.tokens import TokenIssuer

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@dataclass
class AppContext:
    """Everything a request handler may need, built once at startup."""

    settings: Settings
    users: Repository[User]
    appointments: Repository[Appointment]
    contacts: Repository[ContactMessage]
    subscriptions: Repository[NewsletterSubscription]
    user_service: UserService
    appointment_service: AppointmentService
    contact_service: ContactService
    newsletter_service: NewsletterService
    notification_service: NotificationService
    admin_service: AdminService
    tokens: TokenIssuer
    started_at: float = field(default_factory=time.monotonic)
    version: str = VERSION

    def uptime(self) -> float:
        """Seconds since the context was built; never decreases."""
        return time.monotonic() - self.started_at


def build_mailer(settings: Settings) -> SmtpMailer | None:
    """Return an SMTP mailer, or None when credentials are missing."""
    if not settings.email_enabled:
        logger.info("⚠️ Email not configured - using console logs")
        return None

    logger.info(f"📧 Email service configured ({settings.SMTP_HOST}:{settings.SMTP_PORT})")
    return SmtpMailer(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.EMAIL_USER,
        password=settings.EMAIL_PASS,
        timeout=settings.SMTP_TIMEOUT,
    )


def build_context(settings: Settings) -> AppContext:
    """
    Create stores and services for one application instance.

    Args:
        settings: Configuration read at process start

    Returns:
        A fresh AppContext with empty stores (plus the test user if enabled)
    """
    ids = MonotonicIdGenerator()

    users: Repository[User] = InMemoryRepository("users")
    appointments: Repository[Appointment] = InMemoryRepository("appointments")
    contacts: Repository[ContactMessage] = InMemoryRepository("contacts")
    subscriptions: Repository[NewsletterSubscription] = InMemoryRepository("newsletters")

    user_service = UserService(users, ids, bcrypt_rounds=settings.BCRYPT_ROUNDS)
    if settings.SEED_TEST_USER:
        user_service.seed_test_user()

    context = AppContext(
        settings=settings,
        users=users,
        appointments=appointments,
        contacts=contacts,
        subscriptions=subscriptions,
        user_service=user_service,
        appointment_service=AppointmentService(appointments, ids),
        contact_service=ContactService(contacts, ids),
        newsletter_service=NewsletterService(subscriptions),
        notification_service=NotificationService(
            mailer=build_mailer(settings),
            sender=settings.mail_sender,
            admin_email=settings.admin_recipient,
        ),
        admin_service=AdminService(users, appointments, contacts, subscriptions),
        tokens=TokenIssuer(
            secret=settings.JWT_SECRET,
            ttl=timedelta(hours=settings.TOKEN_TTL_HOURS),
        ),
    )
    return context
