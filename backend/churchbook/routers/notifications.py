"""Notification API routes - staff send, each user reads their own."""
import logging
from fastapi import APIRouter, Depends, status

from churchbook.schemas.reminder import NotificationCreate, NotificationOut
from churchbook.services import inbox_service
from churchbook.services.authorization import STAFF, get_actor, require_roles
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=NotificationOut, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Leave a notification for a user."""
    return inbox_service.create_notification(store, payload.user_id, payload.message)


@router.get("/", response_model=list[NotificationOut])
def list_notifications(store: DocumentStore = Depends(get_store), actor: dict = Depends(get_actor)):
    """The caller's notifications, newest first."""
    return inbox_service.list_notifications(store, actor["id"])


@router.post("/{notification_id}/read", response_model=NotificationOut)
def mark_read(
    notification_id: str,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(get_actor),
):
    return inbox_service.mark_read(store, notification_id, actor["id"])
