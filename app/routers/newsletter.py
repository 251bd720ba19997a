# =============================================================================
# app/routers/newsletter.py - Newsletter Signup Endpoint
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ContextDep
from app.exceptions import internal_errors
from core.models import MessageResponse, NewsletterRequest

router = APIRouter()


@router.post("", response_model=MessageResponse)
async def subscribe(
    context: ContextDep,
    body: NewsletterRequest | None = None,
) -> MessageResponse:
    """
    Subscribe an email to the newsletter.

    Raises:
        400: Missing or malformed email, or already subscribed
    """
    body = body or NewsletterRequest()
    with internal_errors("Subscription failed"):
        context.newsletter_service.subscribe(body.email)

    return MessageResponse(message="Successfully subscribed to our newsletter!")
