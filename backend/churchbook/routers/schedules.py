"""Schedule API routes - delegates to schedule_service."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from churchbook.services.authorization import STAFF, require_roles
from churchbook.schemas.schedule import ScheduleCreate, ScheduleUpdate, ScheduleOut
from churchbook.services import schedule_service
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=ScheduleOut, status_code=status.HTTP_201_CREATED)
def create_schedule(
    payload: ScheduleCreate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Create a bookable slot (status `none`)."""
    return schedule_service.create_schedule(store, payload)


@router.get("/", response_model=list[ScheduleOut])
def list_schedules(
    status_filter: Optional[str] = Query(None, alias="status"),
    store: DocumentStore = Depends(get_store),
):
    """List schedules, optionally filtered by status."""
    return schedule_service.list_schedules(store, status_filter)


@router.get("/approved", response_model=list[ScheduleOut])
def list_approved_schedules(store: DocumentStore = Depends(get_store)):
    """Approved schedules, latest start first."""
    return schedule_service.list_approved_schedules(store)


@router.get("/{schedule_id}", response_model=ScheduleOut)
def get_schedule(schedule_id: str, store: DocumentStore = Depends(get_store)):
    return schedule_service.get_schedule_or_404(store, schedule_id)


@router.put("/{schedule_id}", response_model=ScheduleOut)
def update_schedule(
    schedule_id: str,
    payload: ScheduleUpdate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Edit title, description, location or times. Status is not editable here."""
    return schedule_service.update_schedule(store, schedule_id, payload)


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule(
    schedule_id: str,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    schedule_service.delete_schedule(store, schedule_id)
