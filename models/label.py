from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Label:
    """A single label annotation returned by the detection service.

    Attributes:
        description: Concept detected in the image. Untrusted text.
        score: Confidence reported by the service, in [0, 1].
    """

    description: str
    score: float


LabelSet = List[Label]


@dataclass
class UploadedImage:
    """In-memory view of the image sent with an analyze request.

    Attributes:
        original_filename: Filename supplied by the client. Untrusted text.
        content: Raw image bytes.
        declared_size: Size of the upload in bytes.
    """

    original_filename: str
    content: bytes
    declared_size: int
