# =============================================================================
# core/models/contact.py - Contact Message Schemas
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import CamelModel, utcnow


class ContactRequest(CamelModel):
    """Body of POST /api/contact: {"name", "email", "message"}."""
    name: str | None = None
    email: str | None = None
    message: str | None = None


class ContactMessage(CamelModel):
    id: int
    name: str
    email: str
    message: str
    created_at: datetime = Field(default_factory=utcnow)

    model_config = {"frozen": True}
