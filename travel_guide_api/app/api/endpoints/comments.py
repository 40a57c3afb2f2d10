"""
Comment endpoints.

Comments carry ``destinationId`` and ``userId`` references on the
wire.  Only ``text`` can be changed after creation.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from travel_guide_api.app.core.store import CollectionStore, get_store
from travel_guide_api.app.schemas.comment import Comment, CommentCreate, CommentUpdate
from travel_guide_api.app.services.comment_service import CommentService

router = APIRouter()

NOT_FOUND = "Comment not found"


@router.get("/comments", response_model=List[Comment], response_model_exclude_unset=True)
async def list_comments(store: CollectionStore = Depends(get_store)) -> List[Comment]:
    return await CommentService.list_comments(store)


@router.get("/comment/{comment_id}", response_model=Comment, response_model_exclude_unset=True)
async def get_comment(comment_id: str, store: CollectionStore = Depends(get_store)) -> Comment:
    comment = await CommentService.get_comment(store, comment_id)
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return comment


@router.post(
    "/comment",
    response_model=Comment,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    comment_in: Optional[CommentCreate] = Body(None),
    store: CollectionStore = Depends(get_store),
) -> Comment:
    """Create a comment.

    The referenced destination and user are not required to exist.
    """
    return await CommentService.create_comment(store, comment_in or CommentCreate())


@router.patch("/comment/{comment_id}", response_model=Comment, response_model_exclude_unset=True)
async def update_comment(
    comment_id: str,
    comment_in: Optional[CommentUpdate] = Body(None),
    store: CollectionStore = Depends(get_store),
) -> Comment:
    comment = await CommentService.update_comment(store, comment_id, comment_in or CommentUpdate())
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return comment


@router.delete("/comment/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: str, store: CollectionStore = Depends(get_store)) -> None:
    deleted = await CommentService.delete_comment(store, comment_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
