"""Per-user reminders and notifications.

Both collections are private to their owner (`user_id`) and listed newest
first. Delivery to devices is not handled here; these are the stored records.
"""
import logging
from typing import Any

from fastapi import HTTPException, status

from churchbook.models.collections import Collection
from churchbook.services.dates import parse_timestamp, utc_now
from churchbook.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


def _newest_first(docs: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # Documents without a timestamp sort last.
    return sorted(
        docs,
        key=lambda d: parse_timestamp(d.get("created_at")) or parse_timestamp("1970-01-01T00:00:00"),
        reverse=True,
    )


def _owned(store: DocumentStore, collection: Collection, doc_id: str, owner_id: str, label: str) -> dict[str, Any]:
    doc = store.get(collection, doc_id)
    if not doc:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    if doc.get("user_id") != owner_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"{label} belongs to another user")
    return doc


# Reminders

def create_reminder(store: DocumentStore, user_id: str, text: str) -> dict[str, Any]:
    text = (text or "").strip()
    if not text:
        raise HTTPException(status_code=400, detail="Please enter a reminder text")
    reminder = store.create(Collection.reminders, {
        "user_id": user_id,
        "text": text,
        "created_at": utc_now(),
        "reminded": False,
    })
    store.commit()
    logger.info("Reminder %s added for user %s", reminder["id"], user_id)
    return reminder


def list_reminders(store: DocumentStore, user_id: str) -> list[dict[str, Any]]:
    return _newest_first(store.where(Collection.reminders, "user_id", user_id))


def mark_reminded(store: DocumentStore, reminder_id: str, user_id: str) -> dict[str, Any]:
    """Flag a reminder as shown. Repeating it is harmless."""
    _owned(store, Collection.reminders, reminder_id, user_id, "Reminder")
    reminder = store.update(Collection.reminders, reminder_id, {"reminded": True})
    store.commit()
    return reminder


# Notifications

def create_notification(store: DocumentStore, user_id: str, message: str) -> dict[str, Any]:
    message = (message or "").strip()
    if not message:
        raise HTTPException(status_code=400, detail="Please enter a notification message")
    if not store.get(Collection.users, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    notification = store.create(Collection.notifications, {
        "user_id": user_id,
        "message": message,
        "is_read": False,
        "created_at": utc_now(),
    })
    store.commit()
    logger.info("Notification %s queued for user %s", notification["id"], user_id)
    return notification


def list_notifications(store: DocumentStore, user_id: str) -> list[dict[str, Any]]:
    return _newest_first(store.where(Collection.notifications, "user_id", user_id))


def mark_read(store: DocumentStore, notification_id: str, user_id: str) -> dict[str, Any]:
    """Set `is_read`; nothing else on the notification changes."""
    _owned(store, Collection.notifications, notification_id, user_id, "Notification")
    notification = store.update(Collection.notifications, notification_id, {"is_read": True})
    store.commit()
    logger.debug("Notification %s read by %s", notification_id, user_id)
    return notification
