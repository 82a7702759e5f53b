"""Visit scheduling - follow-up visits created from approved appointments."""
import logging
import re
from datetime import date
from typing import Any

from fastapi import HTTPException, status

from churchbook.models.collections import AppointmentStatus, Collection, VisitStatus
from churchbook.schemas.visit import VisitCreate
from churchbook.services.dates import utc_now
from churchbook.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

VISIT_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _validate(payload: VisitCreate) -> tuple[str, str]:
    visit_date = payload.visit_date.strip()
    notes = payload.visit_notes.strip()
    if not visit_date:
        raise HTTPException(status_code=400, detail="Please enter visit date")
    if not notes:
        raise HTTPException(status_code=400, detail="Please enter visit notes")
    if not VISIT_DATE_RE.match(visit_date):
        raise HTTPException(status_code=400, detail="Visit date must be in format YYYY-MM-DD")
    try:
        date.fromisoformat(visit_date)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid visit date: {visit_date}")
    return visit_date, notes


def create_visit(store: DocumentStore, payload: VisitCreate) -> dict[str, Any]:
    visit_date, notes = _validate(payload)

    appointment = store.get(Collection.appointments, payload.appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    if appointment.get("status") != AppointmentStatus.approved.value:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Visits can only be scheduled for approved appointments",
        )

    now = utc_now()
    visit = store.create(Collection.visit_schedules, {
        "appointment_id": appointment["id"],
        "member_id": appointment.get("member_id") or "",
        "pastor_id": appointment.get("pastor_id") or "",
        "status": VisitStatus.pending.value,
        "visit_date": visit_date,
        "visit_notes": notes,
        "created_at": now,
        "updated_at": now,
    })
    store.commit()
    logger.info("Visit %s scheduled on %s for appointment %s", visit["id"], visit_date, appointment["id"])
    return visit


def list_visits(store: DocumentStore) -> list[dict[str, Any]]:
    return store.all(Collection.visit_schedules)
