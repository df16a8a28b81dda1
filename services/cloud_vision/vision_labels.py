"""Label detection via the Google Cloud Vision API."""

import logging
from typing import List, Optional

from google.cloud import vision

from models.label import Label
from services.label_detection import LabelDetectionError, label_from_fields

LOGGER = logging.getLogger(__name__)


class GoogleVisionLabelDetector:
    """Send images to Cloud Vision LABEL_DETECTION and return the labels in order."""

    def __init__(self, client: Optional[vision.ImageAnnotatorAsyncClient] = None) -> None:
        """Initialize the detector.

        Args:
            client: Optional preconfigured async annotator client. When omitted a
                client is built from application default credentials, which
                raises immediately if none are configured.
        """
        self.client = client if client is not None else vision.ImageAnnotatorAsyncClient()

    @staticmethod
    def _build_request(image_bytes: bytes) -> vision.AnnotateImageRequest:
        return vision.AnnotateImageRequest(
            image=vision.Image(content=image_bytes),
            features=[vision.Feature(type_=vision.Feature.Type.LABEL_DETECTION)],
        )

    async def detect_labels(self, image_bytes: bytes) -> List[Label]:
        """Request label annotations for one image.

        Raises:
            LabelDetectionError: If the service reports a per-image error or
                returns no response for the image.
        """
        batch = await self.client.batch_annotate_images(requests=[self._build_request(image_bytes)])
        if not batch.responses:
            raise LabelDetectionError("Vision API returned no response for the image.")

        result = batch.responses[0]
        if result.error.message:
            raise LabelDetectionError(f"Vision API error {result.error.code}: {result.error.message}")

        labels = [label_from_fields(a.description, a.score) for a in result.label_annotations]
        LOGGER.info("Vision API returned %d labels", len(labels))
        return labels

    async def aclose(self) -> None:
        await self.client.transport.close()
