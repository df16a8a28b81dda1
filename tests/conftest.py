from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from main import create_app
from models.label import Label


class FakeLabelDetector:
    """In-memory stand-in for the remote label-detection service."""

    def __init__(self, labels: Optional[List[Label]] = None, error: Optional[Exception] = None) -> None:
        self.labels = labels or []
        self.error = error
        self.calls: List[bytes] = []
        self.closed = False

    async def detect_labels(self, image_bytes: bytes) -> List[Label]:
        self.calls.append(image_bytes)
        if self.error is not None:
            raise self.error
        return list(self.labels)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def detector():
    return FakeLabelDetector()


@pytest.fixture
def client(detector):
    """Test client with the fake detector installed through the app lifespan."""
    app = create_app(label_detector=detector)
    with TestClient(app) as test_client:
        yield test_client
