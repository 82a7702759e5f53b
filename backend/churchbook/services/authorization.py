"""Authorization boundary - every role check in the API goes through here.

The actor is identified by the `X-User-Id` header; the role comes from the
actor's document in the `users` collection, never from the client.
"""
import logging
from typing import Any, Optional

from fastapi import Depends, Header, HTTPException, status

from churchbook.models.collections import Collection
from churchbook.models.role import Role
from churchbook.services.document_store import DocumentStore, get_store

logger = logging.getLogger(__name__)

STAFF = (Role.admin, Role.pastor)


def actor_role(actor: dict[str, Any]) -> Optional[Role]:
    try:
        return Role.parse(actor.get("role", ""))
    except ValueError:
        return None


def get_actor(
    x_user_id: Optional[str] = Header(None),
    store: DocumentStore = Depends(get_store),
) -> dict[str, Any]:
    """Resolve the calling user's document (401 when absent or unknown)."""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id header")
    actor = store.get(Collection.users, x_user_id)
    if not actor:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")
    return actor


def require_roles(*roles: Role):
    """Dependency factory: the actor must hold one of `roles` (403 otherwise)."""

    def _dependency(actor: dict[str, Any] = Depends(get_actor)) -> dict[str, Any]:
        role = actor_role(actor)
        if role not in roles:
            logger.info("User %s (%s) denied; requires %s", actor["id"], actor.get("role"), [r.value for r in roles])
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {', '.join(r.value for r in roles)}",
            )
        return actor

    return _dependency


def ensure_self_or_staff(actor: dict[str, Any], user_id: str) -> None:
    """Members may only read their own records; staff may read anyone's."""
    if actor["id"] == user_id or actor_role(actor) in STAFF:
        return
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to view another user's records")


def get_user_creator(
    x_user_id: Optional[str] = Header(None),
    store: DocumentStore = Depends(get_store),
) -> Optional[dict[str, Any]]:
    """Staff add users. The very first account may be created anonymously."""
    if store.count(Collection.users) == 0:
        logger.warning("No users exist; allowing anonymous creation of the first account")
        return None
    actor = get_actor(x_user_id, store)
    return require_roles(*STAFF)(actor)
