"""
Pydantic models for comments.

A comment links a user to a destination by id.  Neither reference is
checked: comments may point at destinations or users that never
existed or have since been deleted.  On the wire the reference fields
use camelCase (``destinationId``, ``userId``); in Python they are
available as ``destination_id`` and ``user_id``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommentBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination_id: Optional[int] = Field(None, alias="destinationId", examples=[1])
    user_id: Optional[int] = Field(None, alias="userId", examples=[1])
    text: Optional[str] = Field(None, examples=["Amazing city!"])


class CommentCreate(CommentBase):
    """Body accepted by ``POST /api/comment``."""


class CommentUpdate(BaseModel):
    """Body accepted by ``PATCH /api/comment/{id}``.

    Only the text of a comment can be changed.
    """

    text: Optional[str] = None


class Comment(CommentBase):
    """A stored comment record."""

    id: int
