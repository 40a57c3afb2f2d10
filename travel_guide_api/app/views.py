"""
Server‑rendered HTML pages.

The pages are thin Jinja2 templates over the current contents of the
store: the destination index (with the same name filter as the JSON
API), a destination detail page with its comments, and plain listings
of users and comments.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .core.store import CollectionStore, get_store
from .services.comment_service import CommentService
from .services.destination_service import DestinationService
from .services.user_service import UserService

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    name: Optional[str] = Query(None),
    store: CollectionStore = Depends(get_store),
) -> HTMLResponse:
    destinations = await DestinationService.list_destinations(store, name=name)
    return templates.TemplateResponse(
        request, "index.html", {"destinations": destinations, "query": name or ""}
    )


@router.get("/destination/{destination_id}", response_class=HTMLResponse)
async def destination_detail(
    request: Request,
    destination_id: str,
    store: CollectionStore = Depends(get_store),
) -> HTMLResponse:
    destination = await DestinationService.get_destination(store, destination_id)
    if destination is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found")
    comments = await CommentService.list_comments_for_destination(store, destination_id)
    return templates.TemplateResponse(
        request, "destination.html", {"destination": destination, "comments": comments}
    )


@router.get("/users", response_class=HTMLResponse)
async def users_page(request: Request, store: CollectionStore = Depends(get_store)) -> HTMLResponse:
    users = await UserService.list_users(store)
    return templates.TemplateResponse(request, "users.html", {"users": users})


@router.get("/comments", response_class=HTMLResponse)
async def comments_page(request: Request, store: CollectionStore = Depends(get_store)) -> HTMLResponse:
    comments = await CommentService.list_comments(store)
    return templates.TemplateResponse(request, "comments.html", {"comments": comments})
