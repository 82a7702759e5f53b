"""Schedule service - bookable slots managed by pastors and admins.

Status is owned by the booking workflow (booking_service); nothing here
changes it after creation.
"""
import logging
from typing import Any, Optional

from fastapi import HTTPException

from churchbook.models.collections import Collection, ScheduleStatus
from churchbook.schemas.schedule import ScheduleCreate, ScheduleUpdate
from churchbook.services.dates import parse_timestamp, utc_now
from churchbook.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


def _check_time_range(start, end) -> None:
    start_dt, end_dt = parse_timestamp(start), parse_timestamp(end)
    if start_dt and end_dt and end_dt < start_dt:
        raise HTTPException(status_code=400, detail="end_time must not be before start_time")


def get_schedule_or_404(store: DocumentStore, schedule_id: str) -> dict[str, Any]:
    schedule = store.get(Collection.schedules, schedule_id)
    if not schedule:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return schedule


def create_schedule(store: DocumentStore, payload: ScheduleCreate) -> dict[str, Any]:
    if not payload.title.strip():
        raise HTTPException(status_code=400, detail="Title, start time and end time are required")
    _check_time_range(payload.start_time, payload.end_time)

    now = utc_now()
    data = payload.model_dump(mode="json")
    data.update(
        title=payload.title.strip(),
        status=ScheduleStatus.none.value,
        created_at=now,
        updated_at=now,
    )
    schedule = store.create(Collection.schedules, data)
    store.commit()
    logger.info("Created schedule '%s' (%s)", schedule["title"], schedule["id"])
    return schedule


def update_schedule(store: DocumentStore, schedule_id: str, payload: ScheduleUpdate) -> dict[str, Any]:
    current = get_schedule_or_404(store, schedule_id)
    updates = payload.model_dump(mode="json", exclude_unset=True)
    if "title" in updates and not (updates["title"] or "").strip():
        raise HTTPException(status_code=400, detail="Title cannot be empty")
    _check_time_range(updates.get("start_time", current.get("start_time")),
                      updates.get("end_time", current.get("end_time")))

    updates["updated_at"] = utc_now()
    schedule = store.update(Collection.schedules, schedule_id, updates)
    store.commit()
    logger.info("Updated schedule %s", schedule_id)
    return schedule


def delete_schedule(store: DocumentStore, schedule_id: str) -> None:
    if not store.delete(Collection.schedules, schedule_id):
        raise HTTPException(status_code=404, detail="Schedule not found")
    store.commit()
    logger.info("Deleted schedule %s", schedule_id)


def list_schedules(store: DocumentStore, status_filter: Optional[str] = None) -> list[dict[str, Any]]:
    """All schedules, or those whose stored status equals `status_filter` exactly.

    The filter value itself may be given in any casing.
    """
    if status_filter is None:
        return store.all(Collection.schedules)
    try:
        wanted = ScheduleStatus(status_filter.lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid schedule status: {status_filter}")
    return store.where(Collection.schedules, "status", wanted.value)


def list_approved_schedules(store: DocumentStore) -> list[dict[str, Any]]:
    """Approved slots, latest start first - the visit-schedule board."""
    approved = store.where(Collection.schedules, "status", ScheduleStatus.approved.value)
    return sorted(
        approved,
        key=lambda s: parse_timestamp(s.get("start_time")) or parse_timestamp("1970-01-01T00:00:00"),
        reverse=True,
    )
