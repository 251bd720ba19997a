# =============================================================================
# core/models/newsletter.py - Newsletter Schemas
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import CamelModel, utcnow


class NewsletterRequest(CamelModel):
    """Body of POST /api/newsletter: {"email"}."""
    email: str | None = None


class NewsletterSubscription(CamelModel):
    """One subscribed address. Unique by email; there is no unsubscribe."""

    email: str
    subscribed_at: datetime = Field(default_factory=utcnow)

    model_config = {"frozen": True}
