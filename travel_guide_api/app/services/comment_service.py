"""
Business logic for comments.

Comments reference a destination and a user by id.  The references
are stored as given and never checked against the other collections.
"""

import logging
from typing import Any, List, Optional

from . import apply_truthy_updates
from ..core.store import CollectionStore, ids_match
from ..schemas.comment import Comment, CommentCreate, CommentUpdate


logger = logging.getLogger(__name__)


class CommentService:
    """CRUD operations over ``store.comments``."""

    @classmethod
    async def list_comments(cls, store: CollectionStore) -> List[Comment]:
        return store.comments.all()

    @classmethod
    async def list_comments_for_destination(cls, store: CollectionStore, destination_id: Any) -> List[Comment]:
        """Return the comments attached to one destination, in storage order."""
        return [c for c in store.comments.all() if ids_match(c.destination_id, destination_id)]

    @classmethod
    async def get_comment(cls, store: CollectionStore, comment_id: Any) -> Optional[Comment]:
        return store.comments.find(comment_id)

    @classmethod
    async def create_comment(cls, store: CollectionStore, data: CommentCreate) -> Comment:
        fields = data.model_dump(exclude_unset=True)
        comment = store.comments.add(lambda new_id: Comment(id=new_id, **fields))
        logger.info(
            "Created comment %s (destination %s, user %s)",
            comment.id,
            comment.destination_id,
            comment.user_id,
        )
        return comment

    @classmethod
    async def update_comment(cls, store: CollectionStore, comment_id: Any, data: CommentUpdate) -> Optional[Comment]:
        comment = store.comments.find(comment_id)
        if comment is None:
            return None
        apply_truthy_updates(comment, data, ("text",))
        logger.info("Updated comment %s", comment.id)
        return comment

    @classmethod
    async def delete_comment(cls, store: CollectionStore, comment_id: Any) -> bool:
        removed = store.comments.remove(comment_id)
        if removed is None:
            return False
        logger.info("Deleted comment %s", removed.id)
        return True
