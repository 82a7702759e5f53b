"""Visit schedule API routes."""
import logging
from fastapi import APIRouter, Depends, status

from churchbook.schemas.visit import VisitCreate, VisitOut
from churchbook.services import visit_service
from churchbook.services.authorization import STAFF, require_roles
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=VisitOut, status_code=status.HTTP_201_CREATED)
def create_visit(
    payload: VisitCreate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Schedule a visit for an approved appointment."""
    return visit_service.create_visit(store, payload)


@router.get("/", response_model=list[VisitOut])
def list_visits(store: DocumentStore = Depends(get_store)):
    return visit_service.list_visits(store)
