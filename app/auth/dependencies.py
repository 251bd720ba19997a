# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for bearer-token authentication.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.models import AuthUser
from app.dependencies import ContextDep
from app.exceptions import InvalidTokenError, MissingTokenError
from lib.tokens import TokenExpiredError, TokenInvalidError

logger = logging.getLogger(__name__)

# Missing or non-Bearer headers come through as None so we can answer with
# our own error body
security = HTTPBearer(auto_error=False)


async def get_current_user(
    context: ContextDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and verify the bearer token from the Authorization header.

    Fails closed: every problem with a presented token (malformed, bad
    signature, expired) produces the same 403 body.

    Raises:
        MissingTokenError: 401 if no bearer token was sent
        InvalidTokenError: 403 if the token is not acceptable
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    try:
        user_id = context.tokens.verify(credentials.credentials)
    except TokenExpiredError:
        logger.warning("Rejected expired token")
        raise InvalidTokenError()
    except TokenInvalidError as e:
        logger.warning(f"Rejected invalid token: {e}")
        raise InvalidTokenError()

    logger.debug(f"Authenticated user: {user_id}")
    return AuthUser(id=user_id)
