"""Validation helpers for uploaded images."""

from typing import Any, Optional

from fastapi import Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException

from models.label import UploadedImage

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
IMAGE_FIELD = "image"


class UploadError(Exception):
    """Base class for uploads rejected before the analyze handler runs."""

    status_code = 400


class MalformedUploadError(UploadError):
    """Raised when the request body cannot be parsed as a form."""


class UploadTooLargeError(UploadError):
    """Raised when an uploaded file exceeds the configured byte limit."""

    status_code = 413

    def __init__(self, filename: str, limit: int = MAX_UPLOAD_BYTES) -> None:
        self.filename = filename
        self.limit = limit
        super().__init__(f"File {filename!r} exceeds the {limit // (1024 * 1024)} MB upload limit.")


async def read_uploaded_image(value: Any) -> Optional[UploadedImage]:
    """Turn a form value into an UploadedImage.

    Returns None for anything that is not a named file part: a missing field,
    a plain text field, or the empty part browsers send for a blank file input.
    At most MAX_UPLOAD_BYTES + 1 bytes are read.

    Raises:
        UploadTooLargeError: If the file is larger than MAX_UPLOAD_BYTES.
    """
    if not isinstance(value, UploadFile) or not value.filename:
        return None

    content = await value.read(MAX_UPLOAD_BYTES + 1)
    if len(content) > MAX_UPLOAD_BYTES:
        raise UploadTooLargeError(value.filename)

    return UploadedImage(
        original_filename=value.filename,
        content=content,
        declared_size=value.size if value.size is not None else len(content),
    )


async def read_image_upload(request: Request) -> Optional[UploadedImage]:
    """FastAPI dependency reading the `image` form field.

    Runs before the route body, so malformed and oversized uploads are
    rejected without reaching the analyze handler. Other form fields are
    ignored.

    Raises:
        MalformedUploadError: If the body is not a parseable form.
        UploadTooLargeError: If the file is larger than MAX_UPLOAD_BYTES.
    """
    try:
        form = await request.form()
    except StarletteHTTPException as exc:
        raise MalformedUploadError(str(exc.detail)) from exc

    try:
        return await read_uploaded_image(form.get(IMAGE_FIELD))
    finally:
        await form.close()
