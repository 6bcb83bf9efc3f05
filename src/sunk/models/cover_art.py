"""Cover art capability shared by catalog entities."""

import logging
from typing import TYPE_CHECKING

from sunk.api.query import Query

if TYPE_CHECKING:
    from sunk.api.client import Sunk

logger = logging.getLogger(__name__)

COVER_ART_OPERATION = "getCoverArt"


class CoverArtMixin:
    """Fetch cover art for an entity carrying an optional ``cover_id``.

    Mixed into the entity dataclasses; the dataclass declares the
    ``cover_id`` field itself.
    """

    __slots__ = ()

    cover_id: str | None

    @property
    def has_cover_art(self) -> bool:
        """Return True if the server advertised a cover for this entity."""
        return bool(self.cover_id)

    def cover_art(self, client: "Sunk", size: int | None = None) -> bytes | None:
        """Download the cover image.

        Args:
            client: Dispatcher to issue the request with.
            size: Requested edge length in pixels, server default if None.

        Returns:
            Raw image bytes, or None if the entity has no cover art.

        Raises:
            TransportError: If the request fails at the HTTP level.
            ProtocolError: If the server reports a failure.
        """
        if not self.cover_id:
            logger.debug("%s has no cover art", type(self).__name__)
            return None

        params = Query.with_("id", self.cover_id).arg("size", size).build()
        return client.get_bytes(COVER_ART_OPERATION, params)
