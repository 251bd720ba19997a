# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================

from pydantic import BaseModel


class AuthUser(BaseModel):
    """
    Caller identity extracted from a verified bearer token.

    Only the id is carried in the token; the account is not looked up, so a
    token stays valid for its whole lifetime.
    """
    id: int

    model_config = {"frozen": True}
