# =============================================================================
# core/services/contact_service.py - Contact Messages
# =============================================================================

import logging

from app.exceptions import FieldValidationError
from core.models.contact import ContactMessage, ContactRequest
from core.repositories import Repository
from lib.ids import MonotonicIdGenerator
from lib.validation import is_valid_email, missing_fields, normalize_email

logger = logging.getLogger(__name__)


class ContactService:
    """Validates and stores contact-form submissions."""

    def __init__(self, contacts: Repository[ContactMessage], ids: MonotonicIdGenerator):
        self.contacts = contacts
        self.ids = ids

    def submit(self, request: ContactRequest) -> ContactMessage:
        """
        Store a contact message with name and message trimmed.

        Raises:
            FieldValidationError: Missing field or malformed email
        """
        if missing_fields(request.model_dump(), ["name", "email", "message"]):
            raise FieldValidationError("All fields are required")

        if not is_valid_email(request.email):
            raise FieldValidationError("Invalid email format")

        contact = ContactMessage(
            id=self.ids.next_id(),
            name=request.name.strip(),
            email=normalize_email(request.email),
            message=request.message.strip(),
        )
        self.contacts.append(contact)

        logger.info(f"Contact message from: {contact.name} ({contact.email})")
        return contact
