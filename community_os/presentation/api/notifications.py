"""Notifications API Router."""

from fastapi import APIRouter, Depends, Query, status
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.notifications import (
    CreateNotificationCommand,
    CreateNotificationHandler,
    MarkAllReadCommand,
    MarkAllReadHandler,
    MarkNotificationReadCommand,
    MarkNotificationReadHandler,
)
from community_os.application.dto.notification import NotificationDto, UnreadCountDto
from community_os.application.queries.notifications import (
    GetUnreadCountHandler,
    GetUnreadCountQuery,
    GetUserNotificationsHandler,
    GetUserNotificationsQuery,
)
from community_os.config.settings import Config
from community_os.presentation.dependencies.auth import AuthUser, get_current_user
from community_os.presentation.schemas.notifications import (
    CreateNotificationSchema,
    MarkAsReadSchema,
)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationDto])
@inject
async def list_notifications(
    handler: FromDishka[GetUserNotificationsHandler],
    current_user: AuthUser = Depends(get_current_user),
    limit: int = Query(default=Config.NOTIFICATION_LIST_LIMIT, ge=1, le=200),
):
    """The caller's notifications, unread first."""
    query = GetUserNotificationsQuery(user_id=current_user.user_id, limit=limit)
    return await handler.execute(query)


@router.get("/unread-count", response_model=UnreadCountDto)
@inject
async def get_unread_count(
    handler: FromDishka[GetUnreadCountHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    return await handler.execute(GetUnreadCountQuery(user_id=current_user.user_id))


@router.post("", response_model=NotificationDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_notification(
    body: CreateNotificationSchema,
    handler: FromDishka[CreateNotificationHandler],
):
    command = CreateNotificationCommand(
        user_id=body.user_id,
        community_id=body.community_id,
        type=body.type,
        message=body.message,
        link_url=body.link_url,
        actor_id=body.actor_id,
    )
    return await handler.execute(command)


@router.post("/read", response_model=NotificationDto)
@inject
async def mark_notification_read(
    body: MarkAsReadSchema,
    handler: FromDishka[MarkNotificationReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = MarkNotificationReadCommand(
        notification_id=body.notification_id, user_id=current_user.user_id
    )
    return await handler.execute(command)


@router.post("/read-all")
@inject
async def mark_all_read(
    handler: FromDishka[MarkAllReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    count = await handler.execute(MarkAllReadCommand(user_id=current_user.user_id))
    return {"count": count}
