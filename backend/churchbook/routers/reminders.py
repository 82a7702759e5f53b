"""Reminder API routes - each user manages their own reminders."""
import logging
from fastapi import APIRouter, Depends, status

from churchbook.schemas.reminder import ReminderCreate, ReminderOut
from churchbook.services import inbox_service
from churchbook.services.authorization import get_actor
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=ReminderOut, status_code=status.HTTP_201_CREATED)
def create_reminder(
    payload: ReminderCreate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(get_actor),
):
    return inbox_service.create_reminder(store, actor["id"], payload.text)


@router.get("/", response_model=list[ReminderOut])
def list_reminders(store: DocumentStore = Depends(get_store), actor: dict = Depends(get_actor)):
    """The caller's reminders, newest first."""
    return inbox_service.list_reminders(store, actor["id"])


@router.post("/{reminder_id}/reminded", response_model=ReminderOut)
def mark_reminded(
    reminder_id: str,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(get_actor),
):
    return inbox_service.mark_reminded(store, reminder_id, actor["id"])
