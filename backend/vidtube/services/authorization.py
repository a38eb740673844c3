"""Ownership checks for every mutating operation."""

from vidtube.exceptions import ForbiddenError


def authorize(actor_id: int, resource_owner_id: int) -> bool:
    """
    Decide whether an actor may mutate a resource.

    Both identifiers are normalised to int so that a string id from a
    path parameter and an int id from the database compare equal.
    """
    if actor_id is None or resource_owner_id is None:
        return False
    return int(actor_id) == int(resource_owner_id)


def ensure_owner(actor_id: int, resource, message: str | None = None) -> None:
    """
    Raise ForbiddenError unless the actor owns the resource.

    Args:
        actor_id: Authenticated user's id
        resource: Any model with an ``owner_id`` attribute
        message: Optional display message (never mentions the real owner)
    """
    if not authorize(actor_id, resource.owner_id):
        raise ForbiddenError(message)
