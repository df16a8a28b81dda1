"""Utilities to build image input payloads for the Responses API."""

import base64
from typing import Any, Dict, List

_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\xff\xd8\xff", "image/jpeg"),
)


def guess_image_mime(image_bytes: bytes) -> str:
    """Guess the image MIME type from magic bytes, defaulting to JPEG."""
    for signature, mime_type in _SIGNATURES:
        if image_bytes.startswith(signature):
            return mime_type
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def to_image_data_url(image_bytes: bytes) -> str:
    """Convert raw image bytes into a data URL suitable for vision input."""
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{guess_image_mime(image_bytes)};base64,{encoded}"


def build_inputs(system_prompt: str, user_prompt: str, image_bytes: bytes) -> List[Dict[str, Any]]:
    """Build the Responses API input array: system text, user text, then the image."""
    return [
        {
            "type": "message",
            "role": "system",
            "content": [{"type": "input_text", "text": system_prompt}],
        },
        {
            "type": "message",
            "role": "user",
            "content": [
                {"type": "input_text", "text": user_prompt},
                {"type": "input_image", "image_url": to_image_data_url(image_bytes)},
            ],
        },
    ]
