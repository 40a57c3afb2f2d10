"""
Business logic for users.
"""

import logging
from typing import Any, List, Optional

from . import apply_truthy_updates
from ..core.store import CollectionStore
from ..schemas.user import User, UserCreate, UserUpdate


logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("username", "email")


class UserService:
    """CRUD operations over ``store.users``."""

    @classmethod
    async def list_users(cls, store: CollectionStore) -> List[User]:
        return store.users.all()

    @classmethod
    async def get_user(cls, store: CollectionStore, user_id: Any) -> Optional[User]:
        return store.users.find(user_id)

    @classmethod
    async def create_user(cls, store: CollectionStore, data: UserCreate) -> User:
        fields = data.model_dump(exclude_unset=True)
        user = store.users.add(lambda new_id: User(id=new_id, **fields))
        logger.info("Created user %s", user.id)
        return user

    @classmethod
    async def update_user(cls, store: CollectionStore, user_id: Any, data: UserUpdate) -> Optional[User]:
        user = store.users.find(user_id)
        if user is None:
            return None
        apply_truthy_updates(user, data, UPDATABLE_FIELDS)
        logger.info("Updated user %s", user.id)
        return user

    @classmethod
    async def delete_user(cls, store: CollectionStore, user_id: Any) -> bool:
        """Remove a user.

        Comments written by the user are kept and keep pointing at the
        removed id.
        """
        removed = store.users.remove(user_id)
        if removed is None:
            return False
        logger.info("Deleted user %s", removed.id)
        return True
