# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities with no knowledge of the API:
# - validation.py: Email/password/required-field predicates
# - passwords.py: bcrypt hashing
# - tokens.py: Signed, expiring bearer tokens
# - ids.py: Time-derived monotonic ids
# - mailer.py: SMTP transport
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.ids import MonotonicIdGenerator
from lib.mailer import MailerError, SmtpMailer
from lib.passwords import hash_password, verify_password
from lib.tokens import TokenExpiredError, TokenInvalidError, TokenIssuer
from lib.validation import (
    credentials_missing,
    is_strong_password,
    is_valid_email,
    missing_fields,
    normalize_email,
)

__all__ = [
    "MonotonicIdGenerator",
    "MailerError",
    "SmtpMailer",
    "hash_password",
    "verify_password",
    "TokenExpiredError",
    "TokenInvalidError",
    "TokenIssuer",
    "credentials_missing",
    "is_strong_password",
    "is_valid_email",
    "missing_fields",
    "normalize_email",
]
