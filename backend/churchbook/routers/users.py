"""User API routes. Managing users is staff work; members may read their own profile."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from churchbook.models.collections import Collection
from churchbook.models.role import Role
from churchbook.schemas.user import UserCreate, UserUpdate, UserOut
from churchbook.services.authorization import (
    STAFF,
    actor_role,
    ensure_self_or_staff,
    get_actor,
    get_user_creator,
    require_roles,
)
from churchbook.services.dates import utc_now
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    store: DocumentStore = Depends(get_store),
    actor: Optional[dict] = Depends(get_user_creator),
):
    """Create a user (admin, pastor or member)."""
    data = payload.model_dump(mode="json")
    data["created_at"] = utc_now()
    user = store.create(Collection.users, data)
    store.commit()
    logger.info("Created user %s (%s, %s) by %s", user["id"], user["name"], user["role"],
                actor["id"] if actor else "bootstrap")
    return user


@router.get("/", response_model=list[UserOut])
def list_users(
    role: Optional[str] = Query(None),
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """List all users, optionally only those holding `role` (stored casing ignored)."""
    users = store.all(Collection.users)
    if role is None:
        return users
    try:
        wanted = Role.parse(role)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid role: {role}")
    return [u for u in users if actor_role(u) == wanted]


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, store: DocumentStore = Depends(get_store), actor: dict = Depends(get_actor)):
    """Fetch a single user by ID."""
    ensure_self_or_staff(actor, user_id)
    user = store.get(Collection.users, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.patch("/{user_id}", response_model=UserOut)
def update_user(
    user_id: str,
    payload: UserUpdate,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Update profile fields (partial update)."""
    user = store.update(Collection.users, user_id, payload.model_dump(mode="json", exclude_unset=True))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    store.commit()
    logger.info("Updated user %s by %s", user_id, actor["id"])
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    store: DocumentStore = Depends(get_store),
    actor: dict = Depends(require_roles(*STAFF)),
):
    """Delete a user. Documents referencing the user are left in place."""
    if not store.delete(Collection.users, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    store.commit()
    logger.info("Deleted user %s by %s", user_id, actor["id"])
