"""Controller for the upload, detect, render pipeline."""

from fastapi import HTTPException, Request
from fastapi.responses import HTMLResponse

from models.label import UploadedImage
from services.label_detection import LabelDetector
from services.rendering.result_page import render_result_page

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


def get_label_detector(request: Request) -> LabelDetector:
    """Retrieve the shared label detector from the app state."""
    detector = getattr(request.app.state, "label_detector", None)
    if detector is None:
        raise RuntimeError("Label detector not initialized.")
    return detector


async def analyze_image(request: Request, upload: UploadedImage) -> HTMLResponse:
    """Send the uploaded bytes to the label detector and render the result page.

    Args:
        request: FastAPI Request (used to access app.state.label_detector).
        upload: The validated image upload.

    Returns:
        An HTML response listing the detected labels in service order.
    """
    if not upload.content:
        raise HTTPException(status_code=400, detail="Uploaded image is empty.")

    detector = get_label_detector(request)
    labels = await detector.detect_labels(upload.content)
    html = render_result_page(upload.original_filename, labels)
    return HTMLResponse(content=html, media_type=HTML_MEDIA_TYPE)
