"""
Pydantic models for destinations.

A destination is a named place with a free‑form description and the
path of an image served from the public directory.
"""

from typing import Optional

from pydantic import BaseModel, Field


class DestinationBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Paris"])
    description: Optional[str] = Field(None, examples=["The city of lights."])
    image: Optional[str] = Field(None, examples=["/images/paris.jpg"])


class DestinationCreate(DestinationBase):
    """Body accepted by ``POST /api/destination``.

    No field is required; anything omitted is stored as absent.
    """


class DestinationUpdate(DestinationBase):
    """Body accepted by ``PATCH /api/destination/{id}``.

    Only fields that are present and truthy replace the stored value.
    """


class Destination(DestinationBase):
    """A stored destination record."""

    id: int
