"""
Destination endpoints.

These routes expose list, get, create, partial update and delete
operations over the destinations collection.  Record ids in the path
are matched loosely (``/destination/01`` finds id 1); an id that
matches nothing, including one that is not a number, yields 404.

Create and update bodies are JSON.  A request with no body at all is
treated like an empty object.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from travel_guide_api.app.core.store import CollectionStore, get_store
from travel_guide_api.app.schemas.destination import Destination, DestinationCreate, DestinationUpdate
from travel_guide_api.app.services.destination_service import DestinationService

router = APIRouter()

NOT_FOUND = "Destination not found"


@router.get("/destinations", response_model=List[Destination], response_model_exclude_unset=True)
async def list_destinations(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the destination name"),
    store: CollectionStore = Depends(get_store),
) -> List[Destination]:
    """Return all destinations, optionally filtered by name."""
    return await DestinationService.list_destinations(store, name=name)


@router.get("/destination/{destination_id}", response_model=Destination, response_model_exclude_unset=True)
async def get_destination(destination_id: str, store: CollectionStore = Depends(get_store)) -> Destination:
    destination = await DestinationService.get_destination(store, destination_id)
    if destination is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return destination


@router.post(
    "/destination",
    response_model=Destination,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_destination(
    destination_in: Optional[DestinationCreate] = Body(None),
    store: CollectionStore = Depends(get_store),
) -> Destination:
    """Create a destination.

    The new id is the collection size plus one.  No field is required.
    """
    return await DestinationService.create_destination(store, destination_in or DestinationCreate())


@router.patch("/destination/{destination_id}", response_model=Destination, response_model_exclude_unset=True)
async def update_destination(
    destination_id: str,
    destination_in: Optional[DestinationUpdate] = Body(None),
    store: CollectionStore = Depends(get_store),
) -> Destination:
    """Update name, description and image.

    Empty or falsy values are ignored and keep the stored value.
    """
    destination = await DestinationService.update_destination(
        store, destination_id, destination_in or DestinationUpdate()
    )
    if destination is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return destination


@router.delete("/destination/{destination_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_destination(destination_id: str, store: CollectionStore = Depends(get_store)) -> None:
    deleted = await DestinationService.delete_destination(store, destination_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
