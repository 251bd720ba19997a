# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.context import AppContext


def get_context(request: Request) -> AppContext:
    """
    Get the application context of the app serving this request.

    The context lives on `app.state`, so every app instance (including the
    ones tests create) has its own isolated stores.
    """
    return request.app.state.context


# Type alias for dependency injection
ContextDep = Annotated[AppContext, Depends(get_context)]
