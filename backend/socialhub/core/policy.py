"""Ownership checks shared by every mutating handler.

A resource may be changed by its owner, plus any extra grantees the caller
names (e.g. the author of the post hosting a comment may delete it).
"""
from typing import Iterable, Optional
from uuid import UUID

from socialhub.core.errors import ForbiddenError


def is_authorized(actor_id: UUID, owner_id: Optional[UUID], extra_grantees: Iterable[Optional[UUID]] = ()) -> bool:
    if owner_id is not None and actor_id == owner_id:
        return True
    return any(grantee is not None and actor_id == grantee for grantee in extra_grantees)


def authorize(
    actor_id: UUID,
    owner_id: Optional[UUID],
    extra_grantees: Iterable[Optional[UUID]] = (),
    message: str = "You are not authorized to perform this action",
) -> None:
    """Raise ForbiddenError unless ``actor_id`` owns the resource or is a grantee."""
    if not is_authorized(actor_id, owner_id, extra_grantees):
        raise ForbiddenError(message)
