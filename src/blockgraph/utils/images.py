"""Upload validation and image preprocessing before analysis."""

from __future__ import annotations

import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from blockgraph.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {"image/jpeg", "image/png", "image/jpg"}
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def validate_upload(content_type: str | None, size: int, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Reject uploads that are not JPEG/PNG images or exceed ``max_bytes``."""
    if content_type not in ALLOWED_MIME_TYPES:
        raise InvalidInputError("Invalid file type. Only JPEG and PNG images are allowed")
    if size > max_bytes:
        raise InvalidInputError(
            f"File size too large. Maximum size is {max_bytes // (1024 * 1024)}MB"
        )


def preprocess_image(data: bytes, max_size: int = 1200, quality: int = 80) -> bytes:
    """Fit the image inside ``max_size`` x ``max_size`` and re-encode as JPEG."""
    try:
        image = Image.open(io.BytesIO(data))
        image = ImageOps.exif_transpose(image)
        image = image.convert("RGB")
    except (UnidentifiedImageError, OSError) as exc:
        logger.error("Image preprocessing failed: %s", exc)
        raise InvalidInputError("Image preprocessing failed") from exc

    # thumbnail() only ever shrinks, matching a "fit inside" resize
    image.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)

    out = io.BytesIO()
    image.save(out, format="JPEG", quality=quality)
    return out.getvalue()
