"""Label-detection collaborator interface and backend selection."""

from numbers import Real
from typing import Any, Protocol

from models.label import Label, LabelSet


class LabelDetectionError(RuntimeError):
    """Raised when the detection service returns an error or a malformed result."""


class LabelDetector(Protocol):
    """Anything that turns raw image bytes into an ordered list of labels."""

    async def detect_labels(self, image_bytes: bytes) -> LabelSet:
        ...

    async def aclose(self) -> None:
        ...


def label_from_fields(description: Any, score: Any) -> Label:
    """Build a Label from raw annotation fields, failing fast on bad types.

    Raises:
        LabelDetectionError: If description is not a string or score is not a number.
    """
    if not isinstance(description, str):
        raise LabelDetectionError(f"Label annotation has no usable description: {description!r}")
    if isinstance(score, bool) or not isinstance(score, Real):
        raise LabelDetectionError(f"Label annotation {description!r} has no usable score: {score!r}")
    return Label(description=description, score=float(score))


def build_label_detector(provider: str) -> LabelDetector:
    """Construct the detector for the named provider.

    Client construction happens here so missing credentials surface at startup.

    Raises:
        ValueError: If the provider name is not recognised.
    """
    if provider == "google":
        from services.cloud_vision.vision_labels import GoogleVisionLabelDetector

        return GoogleVisionLabelDetector()
    if provider == "openai":
        from services.openai.label_detection import OpenAILabelDetector

        return OpenAILabelDetector()
    raise ValueError(f"Unknown label provider: {provider!r} (expected 'google' or 'openai')")
