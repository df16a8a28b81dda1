"""FastAPI route for analyzing an uploaded image."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from controllers.analyze_controller import HTML_MEDIA_TYPE, analyze_image
from models.label import UploadedImage
from services.rendering.result_page import render_fragment, render_missing_file, render_server_error
from utils.upload_validation import read_image_upload

LOGGER = logging.getLogger(__name__)

router = APIRouter()


def error_message(exc: BaseException) -> str:
    """Return the user-facing text for an exception, never empty."""
    return str(exc) or exc.__class__.__name__


@router.post("/analyze", response_class=HTMLResponse)
async def analyze_route(
    request: Request,
    upload: Optional[UploadedImage] = Depends(read_image_upload),
):
    """Label an uploaded image and return the results as an HTML page."""
    if upload is None:
        return HTMLResponse(content=render_missing_file(), status_code=400, media_type=HTML_MEDIA_TYPE)
    try:
        return await analyze_image(request, upload)
    except HTTPException as exc:
        return HTMLResponse(content=render_fragment(str(exc.detail)), status_code=exc.status_code, media_type=HTML_MEDIA_TYPE)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        LOGGER.exception("Error analyzing image %r", upload.original_filename)
        return HTMLResponse(
            content=render_server_error(error_message(exc)),
            status_code=500,
            media_type=HTML_MEDIA_TYPE,
        )
