"""Notification drain endpoint."""

from fastapi import APIRouter, Depends

from hr_admin.application.schemas.auth import NotificationResponse
from hr_admin.application.services import NotificationCenter
from hr_admin.infrastructure.dependencies import get_notification_center

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[NotificationResponse])
async def drain_notifications(
    notifications: NotificationCenter = Depends(get_notification_center),
) -> list[NotificationResponse]:
    """Return every pending notification, oldest first, and clear the queue."""
    return [NotificationResponse.from_notification(n) for n in notifications.drain()]
