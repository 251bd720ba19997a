# =============================================================================
# core/models/user.py - User and Auth Schemas
# =============================================================================
# - User: stored credential record (never returned to clients as-is)
# - UserPublic: the {id, email} subset clients see
# - LoginRequest / RegisterRequest: auth request bodies
# - LoginResponse: token plus public user info
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field

from .base import CamelModel, utcnow


class User(BaseModel):
    """
    A registered account.

    Created on registration and never mutated. `email` is always lowercase.
    """

    id: int = Field(..., description="Time-derived user id")
    email: str = Field(..., description="Normalized (lowercase) email")
    password_hash: str = Field(..., description="bcrypt hash of the password")
    created_at: datetime = Field(default_factory=utcnow)

    model_config = {"frozen": True}


class UserPublic(CamelModel):
    id: int
    email: str


class LoginRequest(BaseModel):
    """
    Body of POST /api/auth/login.

    Fields are optional here so the route can report missing ones with its
    own message instead of a generic schema error.
    """
    email: str | None = None
    password: str | None = None


class RegisterRequest(BaseModel):
    """Body of POST /api/auth/register."""
    email: str | None = None
    password: str | None = None


class LoginResponse(CamelModel):
    """
    Example:
        {
            "token": "eyJhbGciOi...",
            "user": {"id": 1, "email": "test@wellnesshub.com"},
            "message": "Login successful"
        }
    """
    token: str
    user: UserPublic
    message: str
