"""Booking request API routes - member submission and pastor/admin approval."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from churchbook.models.role import Role
from churchbook.schemas.booking import (
    AssignPastor,
    BookingRequestCreate,
    BookingRequestOut,
    MemberBookingOut,
    PendingBookingOut,
)
from churchbook.schemas.schedule import ScheduleOut
from churchbook.services import booking_service
from churchbook.services.authorization import STAFF, ensure_self_or_staff, get_actor, require_roles
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=BookingRequestOut, status_code=status.HTTP_201_CREATED)
def submit_booking(
    payload: BookingRequestCreate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(Role.member)),
):
    """Request a schedule. The schedule becomes `pending` in the same transaction."""
    return booking_service.submit_booking(store, actor["id"], payload)


@router.get("/pending", response_model=list[PendingBookingOut])
def list_pending(
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Requests whose schedule is still pending, merged with the schedule."""
    return booking_service.list_pending_requests(store)


@router.post("/{request_id}/approve", response_model=ScheduleOut)
def approve_request(
    request_id: str,
    payload: AssignPastor,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Assign a pastor and approve the request's schedule."""
    return booking_service.approve_request(store, request_id, payload.pastor_name)


@router.post("/schedules/{schedule_id}/reject", response_model=ScheduleOut)
def reject_schedule(
    schedule_id: str,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Reject a pending schedule."""
    return booking_service.reject_schedule(store, schedule_id)


@router.get("/member/{member_id}", response_model=list[MemberBookingOut])
def list_member_bookings(
    member_id: str,
    status_filter: Optional[str] = Query("approved", alias="status"),
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(get_actor),
):
    """A member's bookings whose schedule currently has `status`. Members see only their own."""
    ensure_self_or_staff(actor, member_id)
    return booking_service.list_member_bookings(store, member_id, status_filter)
