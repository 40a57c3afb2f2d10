"""
User endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from travel_guide_api.app.core.store import CollectionStore, get_store
from travel_guide_api.app.schemas.user import User, UserCreate, UserUpdate
from travel_guide_api.app.services.user_service import UserService

router = APIRouter()

NOT_FOUND = "User not found"


@router.get("/users", response_model=List[User], response_model_exclude_unset=True)
async def list_users(store: CollectionStore = Depends(get_store)) -> List[User]:
    return await UserService.list_users(store)


@router.get("/user/{user_id}", response_model=User, response_model_exclude_unset=True)
async def get_user(user_id: str, store: CollectionStore = Depends(get_store)) -> User:
    user = await UserService.get_user(store, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return user


@router.post("/user", response_model=User, response_model_exclude_unset=True, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: Optional[UserCreate] = Body(None), store: CollectionStore = Depends(get_store)) -> User:
    """Create a user.  Usernames and e‑mails are not checked for uniqueness."""
    return await UserService.create_user(store, user_in or UserCreate())


@router.patch("/user/{user_id}", response_model=User, response_model_exclude_unset=True)
async def update_user(
    user_id: str,
    user_in: Optional[UserUpdate] = Body(None),
    store: CollectionStore = Depends(get_store),
) -> User:
    user = await UserService.update_user(store, user_id, user_in or UserUpdate())
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return user


@router.delete("/user/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, store: CollectionStore = Depends(get_store)) -> None:
    deleted = await UserService.delete_user(store, user_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
