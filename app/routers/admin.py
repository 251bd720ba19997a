# =============================================================================
# app/routers/admin.py - Protected Admin Endpoints
# =============================================================================
# Every route here requires `Authorization: Bearer <token>`:
# - 401 when no token is sent
# - 403 when the token is malformed, forged or expired
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from app.auth import AuthUser, get_current_user
from app.dependencies import ContextDep
from core.models import NotificationTask, StatsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    context: ContextDep,
    user: AuthUser = Depends(get_current_user),
) -> StatsResponse:
    """
    Store counts plus the five most recent appointments and contacts.
    """
    logger.debug(f"Stats requested by user {user.id}")
    return context.admin_service.summary()


@router.get("/notifications", response_model=list[NotificationTask])
async def list_notifications(
    context: ContextDep,
    user: AuthUser = Depends(get_current_user),
) -> list[NotificationTask]:
    """
    All notification attempts, newest first.

    Shows which confirmation emails were sent, only logged, or failed.
    """
    return context.notification_service.list_tasks()


@router.get("/notifications/{task_id}", response_model=NotificationTask)
async def get_notification(
    task_id: Annotated[str, Path(description="Notification task id")],
    context: ContextDep,
    user: AuthUser = Depends(get_current_user),
) -> NotificationTask:
    """
    One notification attempt.

    Raises:
        404: Unknown task id
    """
    return context.notification_service.get(task_id)
