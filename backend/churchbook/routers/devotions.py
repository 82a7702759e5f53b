"""Prayer & devotion log API routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from churchbook.models.collections import Collection
from churchbook.schemas.devotion import DevotionLogCreate, DevotionLogOut
from churchbook.services.authorization import STAFF, require_roles
from churchbook.services.dates import utc_now
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=DevotionLogOut, status_code=status.HTTP_201_CREATED)
def create_log(
    payload: DevotionLogCreate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Record a day's devotion and prayer for a user."""
    devotion_text = payload.devotion_text.strip()
    prayer_text = payload.prayer_text.strip()
    if not devotion_text or not prayer_text:
        raise HTTPException(status_code=400, detail="Please fill devotion and prayer texts")

    user = store.get(Collection.users, payload.user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    now = utc_now()
    log = store.create(Collection.prayer_devotion_tracker, {
        "user_id": payload.user_id,
        "date": payload.date.isoformat(),
        "devotion_text": devotion_text,
        "prayer_text": prayer_text,
        "created_at": now,
        "updated_at": now,
    })
    store.commit()
    logger.info("Prayer/devotion log %s saved for user %s on %s", log["id"], payload.user_id, log["date"])
    return {**log, "user_name": user.get("name") or "No Name"}


@router.get("/", response_model=list[DevotionLogOut])
def list_logs(store: DocumentStore = Depends(get_store)):
    """All logs, newest first, with the user's name."""
    logs = sorted(
        store.all(Collection.prayer_devotion_tracker),
        key=lambda log: log.get("created_at") or "",
        reverse=True,
    )
    result = []
    for log in logs:
        user = store.get(Collection.users, log["user_id"]) if log.get("user_id") else None
        if user:
            user_name = user.get("name") or "No Name"
        else:
            user_name = "Unknown User"
        result.append({**log, "user_name": user_name})
    return result
