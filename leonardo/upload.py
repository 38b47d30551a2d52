"""Presigned S3 uploads and image encoding helpers."""

from __future__ import annotations

import base64
import json
import logging
import mimetypes
from pathlib import Path
from typing import Any

import httpx

from leonardo.errors import HTTPError, TransportError

logger = logging.getLogger(__name__)

UPLOAD_TIMEOUT = 120.0


def load_fields(fields: str | dict[str, Any] | None) -> dict[str, str]:
    """Presigned form fields arrive as a dict or as a JSON-encoded string."""
    if fields is None:
        return {}
    if isinstance(fields, str):
        fields = json.loads(fields)
        if not isinstance(fields, dict):
            raise ValueError("presigned fields must decode to an object")
    return {str(k): str(v) for k, v in fields.items()}


def upload_to_presigned(
    url: str,
    fields: str | dict[str, Any] | None,
    image: str | Path | bytes,
    *,
    filename: str | None = None,
    timeout: float = UPLOAD_TIMEOUT,
) -> None:
    """POST a file to a presigned storage URL as multipart form data.

    The form fields go first, the file last under ``file``. S3 answers 204 or
    200 on success; anything else raises :class:`HTTPError`.
    """
    if isinstance(image, bytes):
        data = image
        name = filename or "upload"
    else:
        path = Path(image)
        logger.debug("reading upload file: %s", path)
        data = path.read_bytes()
        name = filename or path.name

    content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
    logger.info("uploading %s (%d bytes) to %s", name, len(data), url)
    try:
        r = httpx.post(url, data=load_fields(fields), files={"file": (name, data, content_type)}, timeout=timeout)
    except httpx.TimeoutException as e:
        logger.error("upload to %s timed out: %s", url, e)
        raise TransportError(f"upload to {url} timed out", timed_out=True) from e
    except httpx.RequestError as e:
        logger.error("upload to %s failed: %s", url, e)
        raise TransportError(f"upload to {url} failed: {e}") from e

    if r.status_code not in (httpx.codes.OK, httpx.codes.NO_CONTENT):
        logger.error("upload to %s → %d: %s", url, r.status_code, r.text[:200])
        raise HTTPError(r.status_code)
    logger.info("uploaded %s", name)


def to_data_url(image: str | bytes | Path, mime: str = "image/png") -> str:
    """Convert a file path, raw bytes, or existing data URL to a ``data:`` URL."""
    if isinstance(image, str) and image.startswith("data:"):
        return image
    if isinstance(image, (str, Path)):
        path = Path(image)
        logger.debug("encoding file: %s", path)
        mime = mimetypes.guess_type(path.name)[0] or mime
        image = path.read_bytes()
    if isinstance(image, bytes):
        return f"data:{mime};base64,{base64.b64encode(image).decode()}"
    raise TypeError(f"unsupported image type: {type(image)}")
