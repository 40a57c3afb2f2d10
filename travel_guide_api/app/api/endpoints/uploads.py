"""
Image upload endpoint.

``POST /upload`` takes a multipart form with a single file field named
``image`` and writes it to the images directory under the public
directory, keeping the client's file name.  An existing file with the
same name is overwritten.  Only the final component of the client's
file name is used, so uploads cannot escape the images directory.

The handler is a plain function: FastAPI runs it in its threadpool, so
the disk write does not block the event loop.
"""

import logging
import shutil
from pathlib import PurePosixPath

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import PlainTextResponse

from travel_guide_api.app.core.config import Settings, get_settings

router = APIRouter()
logger = logging.getLogger(__name__)


def upload_filename(raw_name: str) -> str:
    """Return the final path component of a client supplied file name."""
    name = PurePosixPath(raw_name.replace("\\", "/")).name
    if name in {"", ".", ".."}:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed request")
    return name


@router.post("/upload", response_class=PlainTextResponse)
def upload_image(
    image: UploadFile = File(...),
    app_settings: Settings = Depends(get_settings),
) -> str:
    filename = upload_filename(image.filename or "")
    images_dir = app_settings.images_path
    images_dir.mkdir(parents=True, exist_ok=True)
    target = images_dir / filename
    with target.open("wb") as out:
        shutil.copyfileobj(image.file, out)
    logger.info("Stored upload %s", target)
    return "File uploaded successfully"
