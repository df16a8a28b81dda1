"""Label detection via OpenAI's Responses API."""

import logging
import os
from typing import Any, List, Optional

from openai import AsyncOpenAI

from models.label import Label
from services.label_detection import LabelDetectionError, label_from_fields
from services.openai.label_schema import FUNCTION_DEFINITION, FUNCTION_NAME
from services.openai.media_inputs import build_inputs
from services.openai.response_parser import parse_function_call

LOGGER = logging.getLogger(__name__)
DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-5")
SYSTEM_PROMPT = (
    "You are an image labeling service. List the objects, scenes and concepts "
    "visible in the image, each with a confidence score between 0 and 1."
)
USER_PROMPT = "Label this image. Report at most 10 labels, most confident first."


class OpenAILabelDetector:
    """Ask an OpenAI vision model for labels through a forced function call."""

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: str = DEFAULT_MODEL) -> None:
        """Initialize the detector with an OpenAI async client.

        Args:
            client: Optional async OpenAI client instance for dependency injection.
            model: Model name used for the Responses API call.

        Raises:
            RuntimeError: If no client is given and OPENAI_API_KEY is not set.
        """
        if client is None:
            if not os.getenv("OPENAI_API_KEY"):
                raise RuntimeError("OPENAI_API_KEY environment variable is not set")
            client = AsyncOpenAI()
        self.client = client
        self.model = model

    async def detect_labels(self, image_bytes: bytes) -> List[Label]:
        """Request labels for one image.

        Raises:
            LabelDetectionError: If the tool output is missing or malformed.
        """
        response = await self.client.responses.create(
            model=self.model,
            input=build_inputs(SYSTEM_PROMPT, USER_PROMPT, image_bytes),
            tools=[FUNCTION_DEFINITION],
            tool_choice={"type": "function", "name": FUNCTION_NAME},
        )
        return self._parse_labels(response)

    def _parse_labels(self, response: Any) -> List[Label]:
        try:
            arguments = parse_function_call(response, tool_name=FUNCTION_NAME)
        except (RuntimeError, ValueError) as exc:
            LOGGER.debug("Full response object: %r", response)
            raise LabelDetectionError(f"Unable to read labels from the model response: {exc}") from exc

        raw_labels = arguments.get("labels")
        if not isinstance(raw_labels, list):
            raise LabelDetectionError("Model response did not include a labels list.")

        labels: List[Label] = []
        for item in raw_labels:
            if not isinstance(item, dict):
                raise LabelDetectionError(f"Model returned a label that is not an object: {item!r}")
            labels.append(label_from_fields(item.get("description"), item.get("score")))
        LOGGER.info("OpenAI returned %d labels", len(labels))
        return labels

    async def aclose(self) -> None:
        await self.client.close()
