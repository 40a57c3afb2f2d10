"""
Pydantic models for users.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    username: Optional[str] = Field(None, examples=["john_doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])


class UserCreate(UserBase):
    """Body accepted by ``POST /api/user``."""


class UserUpdate(UserBase):
    """Body accepted by ``PATCH /api/user/{id}``."""


class User(UserBase):
    """A stored user record."""

    id: int
