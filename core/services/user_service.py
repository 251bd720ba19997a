# =============================================================================
# core/services/user_service.py - Credential Store
# =============================================================================
# Registration and login against the user repository.
# Hashing is slow on purpose, so it runs in a worker thread to keep the event
# loop free for other requests.
# =============================================================================

import asyncio
import logging

from app.exceptions import AuthError, ConflictError, FieldValidationError
from core.models.user import User
from core.repositories import Repository
from lib.ids import MonotonicIdGenerator
from lib.passwords import DEFAULT_ROUNDS, hash_password, verify_password
from lib.validation import (
    credentials_missing,
    is_strong_password,
    is_valid_email,
    normalize_email,
)

logger = logging.getLogger(__name__)

TEST_USER_ID = 1
TEST_USER_EMAIL = "test@wellnesshub.com"
TEST_USER_PASSWORD = "password123"


class UserService:
    """
    Service for account registration and credential checks.

    Note: the duplicate check and the append are separated by the hashing
    await, so two concurrent registrations of the same email can both pass
    the check.
    """

    def __init__(
        self,
        users: Repository[User],
        ids: MonotonicIdGenerator,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self.users = users
        self.ids = ids
        self.bcrypt_rounds = bcrypt_rounds
        # Checked when the email is unknown so both failure paths cost one bcrypt verify
        self._dummy_hash = hash_password("not-a-real-password", rounds=bcrypt_rounds)

    def get_by_email(self, email: str) -> User | None:
        normalized = normalize_email(email)
        return self.users.find(lambda u: u.email == normalized)

    def seed_test_user(self) -> User | None:
        """
        Create the well-known test account if it doesn't exist yet.

        Returns:
            The created user, or None if it was already there
        """
        if self.get_by_email(TEST_USER_EMAIL):
            return None

        user = User(
            id=TEST_USER_ID,
            email=TEST_USER_EMAIL,
            password_hash=hash_password(TEST_USER_PASSWORD, rounds=self.bcrypt_rounds),
        )
        self.users.append(user)
        logger.info(f"Test user created: {TEST_USER_EMAIL} / {TEST_USER_PASSWORD}")
        return user

    async def register(self, email: str | None, password: str | None) -> User:
        """
        Register a new account.

        Args:
            email: Raw email from the request (any case)
            password: Plaintext password

        Returns:
            The stored User

        Raises:
            FieldValidationError: Missing fields, bad email, short password
            ConflictError: Email already registered (case-insensitive)
        """
        if credentials_missing(email, password):
            raise FieldValidationError("Email and password are required")

        if not is_valid_email(email):
            raise FieldValidationError("Invalid email format")

        if not is_strong_password(password):
            raise FieldValidationError("Password must be at least 6 characters")

        normalized = normalize_email(email)
        if self.get_by_email(normalized):
            raise ConflictError("User already exists")

        password_hash = await asyncio.to_thread(hash_password, password, self.bcrypt_rounds)

        user = User(
            id=self.ids.next_id(),
            email=normalized,
            password_hash=password_hash,
        )
        self.users.append(user)

        logger.info(f"New user registered: {normalized}")
        return user

    async def authenticate(self, email: str | None, password: str | None) -> User:
        """
        Check credentials and return the matching user.

        Unknown email and wrong password raise the same AuthError so callers
        can't tell which check failed.

        Raises:
            FieldValidationError: Missing fields or bad email format
            AuthError: Invalid credentials
        """
        if credentials_missing(email, password):
            raise FieldValidationError("Email and password are required")

        if not is_valid_email(email):
            raise FieldValidationError("Invalid email format")

        user = self.get_by_email(email)
        stored_hash = user.password_hash if user else self._dummy_hash

        password_ok = await asyncio.to_thread(verify_password, password, stored_hash)
        if user is None or not password_ok:
            logger.info(f"Failed login attempt for {normalize_email(email)}")
            raise AuthError("Invalid credentials")

        logger.info(f"User logged in: {user.email}")
        return user
