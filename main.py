import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from controllers.analyze_controller import HTML_MEDIA_TYPE
from routes.analyze_route import router as analyze_router
from services.label_detection import LabelDetector, build_label_detector
from services.rendering.result_page import render_fragment
from utils.config import PUBLIC_DIR, get_host, get_label_provider, get_port
from utils.upload_validation import UploadError

load_dotenv()  # Load environment variables from .env file if present

LOGGER = logging.getLogger(__name__)


def create_app(label_detector: Optional[LabelDetector] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    Args:
        label_detector: Optional detector to use instead of building one from
            LABEL_PROVIDER at startup. The caller keeps ownership of it.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Build the process-wide label detector once and attach it to `app.state`.
        Construction fails fast when the provider's credentials are missing.
        """
        provider = get_label_provider()
        owned = label_detector is None
        try:
            detector = build_label_detector(provider) if owned else label_detector
        except Exception as exc:
            raise RuntimeError(f"Failed to initialize the {provider!r} label detector") from exc

        app.state.label_provider = provider if owned else None
        app.state.label_detector = detector

        try:
            yield
        finally:
            app.state.label_detector = None
            if owned:
                try:
                    await detector.aclose()
                except Exception as exc:  # pylint: disable=broad-exception-caught
                    LOGGER.warning("Error while closing label detector: %s", exc)

    app = FastAPI(title="Image Label Viewer", lifespan=lifespan)

    @app.exception_handler(UploadError)
    async def upload_rejected(request: Request, exc: UploadError):
        """Reject malformed or oversized uploads before the analyze handler runs."""
        LOGGER.warning("Rejected upload: %s", exc)
        return HTMLResponse(content=render_fragment(str(exc)), status_code=exc.status_code, media_type=HTML_MEDIA_TYPE)

    @app.get("/health")
    async def health(request: Request):
        """
        Simple health check that reports whether the label detector is ready.
        """
        detector = getattr(request.app.state, "label_detector", None)
        return {
            "ok": True,
            "label_detector_available": detector is not None,
            "provider": getattr(request.app.state, "label_provider", None),
        }

    # Register application routers
    app.include_router(analyze_router)

    # Serve the upload form and other static assets; mounted last so routes win.
    if PUBLIC_DIR.exists():
        app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")

    return app


app = create_app()


def run() -> None:
    """Start uvicorn on HOST:PORT."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    port = get_port()
    LOGGER.info("Server listening on port %d", port)
    uvicorn.run(app, host=get_host(), port=port)


if __name__ == "__main__":
    run()
