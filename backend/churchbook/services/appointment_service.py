"""Appointment workflow - pastor/member meetings with their own approval status.

Independent of Schedule.status: approving an appointment never touches the
schedule it references, and the status values are capitalised
("Approved"/"Rejected") unlike the schedule path.
"""
import logging
from typing import Any, Optional

from fastapi import HTTPException, status

from churchbook.models.collections import AppointmentStatus, Collection
from churchbook.schemas.appointment import AppointmentCreate
from churchbook.services.dates import format_display_date, utc_now
from churchbook.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


def _user_name(user: Optional[dict[str, Any]]) -> Optional[str]:
    if not user:
        return None
    return user.get("fullName") or user.get("name") or None


def _schedule_info(schedule: dict[str, Any]) -> Optional[str]:
    start = format_display_date(schedule.get("start_time"))
    end = format_display_date(schedule.get("end_time"))
    if start and end:
        return f"{start} to {end}"
    return None


def _lookup(store: DocumentStore, collection: Collection, doc_id: Optional[str]) -> Optional[dict[str, Any]]:
    return store.get(collection, doc_id) if doc_id else None


def _with_details(store: DocumentStore, appointment: dict[str, Any]) -> tuple[dict[str, Any], bool]:
    """Denormalize one appointment. Second value is False when any lookup failed."""
    member = _lookup(store, Collection.users, appointment.get("member_id"))
    pastor = _lookup(store, Collection.users, appointment.get("pastor_id"))
    schedule = _lookup(store, Collection.schedules, appointment.get("schedule_id"))

    detail = {
        **appointment,
        "member_name": _user_name(member),
        "pastor_name": _user_name(pastor),
        "schedule_title": schedule.get("title") if schedule else None,
        "location": schedule.get("location") if schedule else None,
        "schedule_info": _schedule_info(schedule) if schedule else None,
    }
    return detail, bool(member and pastor and schedule)


def create_appointment(store: DocumentStore, member_id: str, payload: AppointmentCreate) -> dict[str, Any]:
    if not payload.schedule_id.strip() or not payload.pastor_id.strip():
        raise HTTPException(status_code=400, detail="schedule_id and pastor_id are required")

    now = utc_now()
    appointment = store.create(Collection.appointments, {
        "schedule_id": payload.schedule_id,
        "member_id": member_id,
        "pastor_id": payload.pastor_id,
        "notes": payload.notes,
        "status": AppointmentStatus.pending.value,
        "created_at": now,
        "updated_at": now,
    })
    store.commit()
    logger.info("Appointment %s requested by member %s with pastor %s",
                appointment["id"], member_id, payload.pastor_id)
    return appointment


def list_pending_appointments(store: DocumentStore) -> list[dict[str, Any]]:
    """Pending appointments whose member, pastor and schedule all resolve.

    Rows with a dangling reference are dropped without error.
    """
    rows = []
    for appointment in store.all(Collection.appointments):
        if appointment.get("status") != AppointmentStatus.pending.value:
            continue
        detail, resolved = _with_details(store, appointment)
        if not resolved:
            logger.debug("Dropping appointment %s: unresolved member/pastor/schedule", appointment["id"])
            continue
        rows.append(detail)
    return rows


def list_approved_appointments(store: DocumentStore) -> list[dict[str, Any]]:
    """Approved appointments, ready for a visit. Unresolved names are left empty."""
    return [
        _with_details(store, appointment)[0]
        for appointment in store.where(Collection.appointments, "status", AppointmentStatus.approved.value)
    ]


def _set_status(store: DocumentStore, appointment_id: str, new_status: AppointmentStatus) -> dict[str, Any]:
    appointment = store.get(Collection.appointments, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    if appointment.get("status") != AppointmentStatus.pending.value:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Appointment is already {appointment.get('status')}",
        )

    # Only the status field is written.
    appointment = store.update(Collection.appointments, appointment_id, {"status": new_status.value})
    store.commit()
    logger.info("Appointment %s %s", appointment_id, new_status.value)
    return appointment


def approve_appointment(store: DocumentStore, appointment_id: str) -> dict[str, Any]:
    return _set_status(store, appointment_id, AppointmentStatus.approved)


def reject_appointment(store: DocumentStore, appointment_id: str) -> dict[str, Any]:
    return _set_status(store, appointment_id, AppointmentStatus.rejected)
