"""
Business logic for destinations.

Destinations are the only collection with a search filter: listing
accepts a case‑insensitive substring that must occur in the name.
"""

import logging
from typing import Any, List, Optional

from . import apply_truthy_updates
from ..core.store import CollectionStore
from ..schemas.destination import Destination, DestinationCreate, DestinationUpdate


logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "image")


class DestinationService:
    """CRUD operations over ``store.destinations``."""

    @classmethod
    async def list_destinations(cls, store: CollectionStore, name: Optional[str] = None) -> List[Destination]:
        """Return destinations in storage order.

        When ``name`` is non‑empty only destinations whose name contains
        it (ignoring case) are returned.  Destinations without a name
        never match a filter.
        """
        destinations = store.destinations.all()
        if name:
            needle = name.lower()
            destinations = [
                d for d in destinations if d.name is not None and needle in d.name.lower()
            ]
        return destinations

    @classmethod
    async def get_destination(cls, store: CollectionStore, destination_id: Any) -> Optional[Destination]:
        destination = store.destinations.find(destination_id)
        if destination is None:
            logger.debug("Destination %s not found", destination_id)
        return destination

    @classmethod
    async def create_destination(cls, store: CollectionStore, data: DestinationCreate) -> Destination:
        """Append a new destination and return it.

        Fields missing from ``data`` stay unset on the record and are
        left out of its JSON representation.
        """
        fields = data.model_dump(exclude_unset=True)
        destination = store.destinations.add(lambda new_id: Destination(id=new_id, **fields))
        logger.info("Created destination %s", destination.id)
        return destination

    @classmethod
    async def update_destination(
        cls, store: CollectionStore, destination_id: Any, data: DestinationUpdate
    ) -> Optional[Destination]:
        destination = store.destinations.find(destination_id)
        if destination is None:
            logger.debug("Destination %s not found", destination_id)
            return None
        apply_truthy_updates(destination, data, UPDATABLE_FIELDS)
        logger.info("Updated destination %s", destination.id)
        return destination

    @classmethod
    async def delete_destination(cls, store: CollectionStore, destination_id: Any) -> bool:
        """Remove a destination.  Returns ``False`` if none matched."""
        removed = store.destinations.remove(destination_id)
        if removed is None:
            logger.debug("Destination %s not found", destination_id)
            return False
        logger.info("Deleted destination %s", removed.id)
        return True
