"""Dashboard API routes - collection counts and the role-filtered menu."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from churchbook.models.collections import Collection, ScheduleStatus
from churchbook.schemas.dashboard import DashboardCounts, MenuOut
from churchbook.services.authorization import actor_role, get_actor
from churchbook.services.document_store import DocumentStore, get_store
from churchbook.services.menu import MENU_TITLES, visible_links

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/counts", response_model=DashboardCounts)
def get_counts(store: DocumentStore = Depends(get_store)):
    return DashboardCounts(
        total_users=store.count(Collection.users),
        schedules=store.count(Collection.schedules),
        appointments=store.count(Collection.appointments),
        visit_schedules=store.count(Collection.visit_schedules),
        prayer_logs=store.count(Collection.prayer_devotion_tracker),
        pending_bookings=len(store.where(Collection.schedules, "status", ScheduleStatus.pending.value)),
    )


@router.get("/menu", response_model=MenuOut)
def get_menu(actor: dict = Depends(get_actor)):
    """Menu links visible to the calling user's role."""
    role = actor_role(actor)
    if role is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User has no valid role")
    return MenuOut(
        title=MENU_TITLES[role],
        role=role.value,
        links=[{"label": l.label, "icon": l.icon, "screen": l.screen} for l in visible_links(role)],
    )
