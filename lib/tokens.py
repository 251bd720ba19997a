# =============================================================================
# lib/tokens.py - Bearer Token Issuing and Verification
# =============================================================================
# HS256 JWTs carrying the user id ("sub") and an expiry ("exp").
# Tokens are never stored: each request re-checks signature and expiry.
#
# Usage:
#   issuer = TokenIssuer(secret="...", ttl=timedelta(hours=24))
#   token = issuer.issue(user_id=42)
#   issuer.verify(token)  # 42
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)


class TokenInvalidError(Exception):
    """Token is malformed, has a bad signature, or lacks required claims."""


class TokenExpiredError(TokenInvalidError):
    """Token signature is fine but its lifetime is over."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """
    Issues and verifies signed, time-limited bearer tokens.

    Expiry is checked against the injected clock rather than inside the JWT
    library, so callers (and tests) can verify a token "as of" any instant.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: int, now: datetime | None = None) -> str:
        """
        Create a token for a user.

        Args:
            user_id: The authenticated user's id
            now: Issue time (defaults to the clock)

        Returns:
            Encoded JWT string
        """
        issued_at = now or self._clock()
        claims = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str, now: datetime | None = None) -> int:
        """
        Verify a token and return the user id it carries.

        Raises:
            TokenExpiredError: If `now` is past the token's expiry
            TokenInvalidError: For any other problem
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.debug(f"Token rejected: {e}")
            raise TokenInvalidError(str(e)) from e

        exp = payload.get("exp")
        sub = payload.get("sub")
        if not isinstance(exp, (int, float)) or sub is None:
            raise TokenInvalidError("Token missing required claims")

        try:
            user_id = int(sub)
        except (TypeError, ValueError) as e:
            raise TokenInvalidError("Token subject is not a user id") from e

        current = now or self._clock()
        if current.timestamp() >= exp:
            raise TokenExpiredError("Token has expired")

        return user_id
