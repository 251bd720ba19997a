# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# The frontend speaks camelCase JSON (firstName, createdAt, ...) while Python
# code uses snake_case attributes. CamelModel maps between the two.
# =============================================================================

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Timezone-aware current time, used for every created_at/subscribed_at."""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, populated by either form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    """Generic success body: {"message": "..."}."""
    message: str
