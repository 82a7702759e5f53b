"""Appointment API routes."""
import logging
from fastapi import APIRouter, Depends, status

from churchbook.models.role import Role
from churchbook.schemas.appointment import AppointmentCreate, AppointmentOut, AppointmentDetailOut
from churchbook.services import appointment_service
from churchbook.services.authorization import STAFF, require_roles
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=AppointmentOut, status_code=status.HTTP_201_CREATED)
def create_appointment(
    payload: AppointmentCreate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(Role.member)),
):
    return appointment_service.create_appointment(store, actor["id"], payload)


@router.get("/pending", response_model=list[AppointmentDetailOut])
def list_pending(
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Pending appointments with member, pastor and schedule names filled in."""
    return appointment_service.list_pending_appointments(store)


@router.get("/approved", response_model=list[AppointmentDetailOut])
def list_approved(
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    return appointment_service.list_approved_appointments(store)


@router.post("/{appointment_id}/approve", response_model=AppointmentOut)
def approve_appointment(
    appointment_id: str,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    return appointment_service.approve_appointment(store, appointment_id)


@router.post("/{appointment_id}/reject", response_model=AppointmentOut)
def reject_appointment(
    appointment_id: str,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    return appointment_service.reject_appointment(store, appointment_id)
