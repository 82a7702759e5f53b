"""Booking workflow - member requests against schedules and their approval.

State lives on the Schedule:
    none/rejected --submit--> pending --approve--> approved
                                      --reject---> rejected

Request documents are written once at submission and never touched again;
whether a request is "open" is read from its schedule's status.
"""
import logging
from typing import Any, Optional

from fastapi import HTTPException, status

from churchbook.models.collections import Collection, ScheduleStatus
from churchbook.schemas.booking import BookingRequestCreate
from churchbook.services.dates import utc_now
from churchbook.services.document_store import DocumentStore
from churchbook.services.schedule_service import get_schedule_or_404

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = (
    "member_name",
    "member_email",
    "member_contact",
    "member_address",
    "member_purok",
    "church_name",
)


def _missing_fields(payload: BookingRequestCreate) -> list[str]:
    missing = [f for f in REQUIRED_TEXT_FIELDS if not (getattr(payload, f) or "").strip()]
    if not payload.number_of_members or payload.number_of_members < 1:
        missing.append("number_of_members")
    return missing


def _require_pending(schedule: dict[str, Any]) -> None:
    if schedule.get("status") != ScheduleStatus.pending.value:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Schedule is {schedule.get('status', 'none')}, not pending",
        )


def submit_booking(store: DocumentStore, member_id: str, payload: BookingRequestCreate) -> dict[str, Any]:
    """Create a request and mark its schedule pending, in one transaction.

    Validation happens before any write; a missing field leaves the store untouched.
    """
    missing = _missing_fields(payload)
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Please complete all fields before submitting", "missing_fields": missing},
        )

    schedule = get_schedule_or_404(store, payload.schedule_id)
    if schedule.get("status") == ScheduleStatus.approved.value:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Schedule is already booked")

    data = {f: getattr(payload, f).strip() for f in REQUIRED_TEXT_FIELDS}
    data.update(
        schedule_id=payload.schedule_id,
        member_id=member_id,
        number_of_members=payload.number_of_members,
        created_at=utc_now(),
    )
    request = store.create(Collection.request_bookings, data)
    store.update(Collection.schedules, payload.schedule_id, {"status": ScheduleStatus.pending.value})
    store.commit()
    logger.info("Booking request %s submitted for schedule %s by member %s",
                request["id"], payload.schedule_id, member_id)
    return request


def list_pending_requests(store: DocumentStore) -> list[dict[str, Any]]:
    """Requests whose schedule is still pending, each merged with that schedule."""
    pending = {
        s["id"]: s for s in store.where(Collection.schedules, "status", ScheduleStatus.pending.value)
    }
    merged = []
    for request in store.all(Collection.request_bookings):
        schedule = pending.get(request.get("schedule_id"))
        if not schedule:
            continue
        merged.append({
            **request,
            "title": schedule.get("title"),
            "description": schedule.get("description"),
            "location": schedule.get("location"),
            "start_time": schedule.get("start_time"),
            "end_time": schedule.get("end_time"),
            "status": schedule.get("status"),
        })
    return merged


def approve_request(store: DocumentStore, request_id: str, pastor_name: str) -> dict[str, Any]:
    """Assign a pastor and approve the request's schedule. The request itself is not modified."""
    pastor_name = (pastor_name or "").strip()
    if not pastor_name:
        raise HTTPException(status_code=400, detail="Please enter a pastor name")

    request = store.get(Collection.request_bookings, request_id)
    if not request:
        raise HTTPException(status_code=404, detail="Booking request not found")
    schedule = store.get(Collection.schedules, request.get("schedule_id") or "")
    if not schedule:
        raise HTTPException(status_code=404, detail="Associated schedule not found")
    _require_pending(schedule)

    schedule = store.update(Collection.schedules, schedule["id"], {
        "status": ScheduleStatus.approved.value,
        "assigned_pastor": pastor_name,
        "updated_at": utc_now(),
    })
    store.commit()
    logger.info("Booking request %s approved; schedule %s assigned to %s", request_id, schedule["id"], pastor_name)
    return schedule


def reject_schedule(store: DocumentStore, schedule_id: str) -> dict[str, Any]:
    schedule = get_schedule_or_404(store, schedule_id)
    _require_pending(schedule)

    schedule = store.update(Collection.schedules, schedule_id, {
        "status": ScheduleStatus.rejected.value,
        "updated_at": utc_now(),
    })
    store.commit()
    logger.info("Schedule %s rejected", schedule_id)
    return schedule


def list_member_bookings(
    store: DocumentStore,
    member_id: str,
    status_filter: Optional[str] = ScheduleStatus.approved.value,
) -> list[dict[str, Any]]:
    """A member's requests with their schedule's current state, filtered by that state."""
    schedules = {s["id"]: s for s in store.all(Collection.schedules)}
    rows = []
    for request in store.where(Collection.request_bookings, "member_id", member_id):
        schedule = schedules.get(request.get("schedule_id"), {})
        row = {
            **request,
            "schedule_status": schedule.get("status"),
            "schedule_title": schedule.get("title"),
            "schedule_location": schedule.get("location"),
            "schedule_start_time": schedule.get("start_time"),
            "schedule_end_time": schedule.get("end_time"),
            "assigned_pastor": schedule.get("assigned_pastor") or "N/A",
        }
        if status_filter and row["schedule_status"] != status_filter:
            continue
        rows.append(row)
    return rows
