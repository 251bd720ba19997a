# =============================================================================
# core/services/newsletter_service.py - Newsletter Subscriptions
# =============================================================================

import logging

from app.exceptions import ConflictError, FieldValidationError
from core.models.newsletter import NewsletterSubscription
from core.repositories import Repository
from lib.validation import is_blank, is_valid_email, normalize_email

logger = logging.getLogger(__name__)


class NewsletterService:
    """Subscriptions are unique by (lowercased) email and never removed."""

    def __init__(self, subscriptions: Repository[NewsletterSubscription]):
        self.subscriptions = subscriptions

    def is_subscribed(self, email: str) -> bool:
        normalized = normalize_email(email)
        return self.subscriptions.find(lambda s: s.email == normalized) is not None

    def subscribe(self, email: str | None) -> NewsletterSubscription:
        """
        Add an email to the newsletter list.

        Raises:
            FieldValidationError: Missing or malformed email
            ConflictError: Already subscribed (case-insensitive)
        """
        if is_blank(email):
            raise FieldValidationError("Email is required")

        if not is_valid_email(email):
            raise FieldValidationError("Invalid email format")

        normalized = normalize_email(email)
        if self.is_subscribed(normalized):
            raise ConflictError("Email already subscribed")

        subscription = self.subscriptions.append(NewsletterSubscription(email=normalized))
        logger.info(f"Newsletter subscription: {normalized}")
        return subscription
