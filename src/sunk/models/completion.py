"""Completion rule for nested collections embedded in a response.

Servers may truncate nested lists (an artist's albums, an album's songs)
while still reporting the full count. An embedded list is only returned
as-is when its length matches the declared count; otherwise the owning
entity is fetched again.
"""

import logging
from collections.abc import Callable, Sequence, Sized
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_complete(embedded: Sized, declared_count: int) -> bool:
    """Return True if the embedded collection holds every declared entry."""
    return len(embedded) == declared_count


def complete_list(
    embedded: Sequence[T],
    declared_count: int,
    refetch: Callable[[], Sequence[T]],
    what: str,
) -> list[T]:
    """Return the full collection, refetching when the embedded one is partial.

    Args:
        embedded: Collection decoded with the owning entity.
        declared_count: Entry count reported by the server.
        refetch: Performs one request for the full collection.
        what: Collection name, for logging.

    Returns:
        A new list; the embedded collection is never modified.
    """
    if is_complete(embedded, declared_count):
        return list(embedded)

    logger.debug(
        "Embedded %s list has %d of %d entries, refetching",
        what,
        len(embedded),
        declared_count,
    )
    return list(refetch())
