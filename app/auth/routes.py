# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# POST /api/auth/login     - exchange credentials for a bearer token
# POST /api/auth/register  - create an account
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ContextDep
from app.exceptions import internal_errors
from core.models import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    UserPublic,
)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    context: ContextDep,
    body: LoginRequest | None = None,
) -> LoginResponse:
    """
    Log in with email and password.

    Returns:
        LoginResponse: Bearer token plus the user's id and email

    Raises:
        400: Missing fields or malformed email
        401: Unknown email or wrong password (same message for both)
    """
    body = body or LoginRequest()
    with internal_errors("Internal server error"):
        user = await context.user_service.authenticate(body.email, body.password)
        token = context.tokens.issue(user.id)

    return LoginResponse(
        token=token,
        user=UserPublic(id=user.id, email=user.email),
        message="Login successful",
    )


@router.post("/register", response_model=MessageResponse)
async def register(
    context: ContextDep,
    body: RegisterRequest | None = None,
) -> MessageResponse:
    """
    Register a new account.

    Raises:
        400: Missing fields, malformed email, password under 6 characters,
             or email already registered
    """
    body = body or RegisterRequest()
    with internal_errors("Internal server error"):
        await context.user_service.register(body.email, body.password)

    return MessageResponse(message="User registered successfully")
