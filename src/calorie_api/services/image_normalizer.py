"""
Image normalization for recognition uploads.

Decodes an arbitrary raster image, downsamples it so neither edge exceeds
``max_edge`` (aspect ratio preserved, never upscaled) and re-encodes it as
base64 JPEG for the remote model.
"""

import base64
import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError
from pydantic import BaseModel, Field

from calorie_api.core.exceptions import DecodeError

logger = logging.getLogger(__name__)

DEFAULT_MAX_EDGE = 512
DEFAULT_JPEG_QUALITY = 90


class NormalizedImage(BaseModel):
    """A compact JPEG ready for submission to the recognition model."""

    image_base64: str = Field(..., description="Base64 JPEG bytes, no data-URL prefix")
    width: int
    height: int
    original_width: int
    original_height: int
    mime_type: str = "image/jpeg"

    @property
    def data_url(self) -> str:
        """Data URL usable as a preview / captured-image reference."""
        return f"data:{self.mime_type};base64,{self.image_base64}"


def compute_target_size(width: int, height: int, max_edge: int = DEFAULT_MAX_EDGE) -> tuple[int, int]:
    """
    Scale ``(width, height)`` by ``min(1, max_edge / max(width, height))``.

    The longer edge lands exactly on ``max_edge``; the shorter edge is rounded
    and never drops below one pixel.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid image dimensions: {width}x{height}")

    longest = max(width, height)
    if longest <= max_edge:
        return width, height

    scale = max_edge / longest
    if width >= height:
        return max_edge, max(1, round(height * scale))
    return max(1, round(width * scale)), max_edge


def normalize_image(
    data: bytes,
    *,
    max_edge: int = DEFAULT_MAX_EDGE,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> NormalizedImage:
    """
    Decode, bound and re-encode an image.

    Args:
        data: Raw image file bytes (any format Pillow can decode)
        max_edge: Maximum width and height of the output
        quality: JPEG quality (Pillow scale)

    Returns:
        NormalizedImage with base64 JPEG and the output dimensions

    Raises:
        DecodeError: If the bytes are not a decodable image or cannot be
            converted to an RGB surface
    """
    if not data:
        raise DecodeError("Image file is empty")

    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        raise DecodeError(
            f"Could not decode image: {e}",
            details={"size_bytes": len(data)},
        ) from e

    original_width, original_height = image.size

    try:
        image = ImageOps.exif_transpose(image)
        surface = _to_rgb(image)
    except (OSError, ValueError) as e:
        raise DecodeError(
            f"Could not draw image onto an RGB surface: {e}",
            details={"mode": image.mode},
        ) from e

    target = compute_target_size(surface.width, surface.height, max_edge)
    if target != surface.size:
        surface = surface.resize(target, Image.Resampling.LANCZOS)

    output = io.BytesIO()
    surface.save(output, format="JPEG", quality=quality, optimize=True)
    encoded = base64.b64encode(output.getvalue()).decode("ascii")

    logger.debug(
        f"Normalized image {original_width}x{original_height} -> "
        f"{surface.width}x{surface.height} ({len(encoded)} b64 chars)"
    )

    return NormalizedImage(
        image_base64=encoded,
        width=surface.width,
        height=surface.height,
        original_width=original_width,
        original_height=original_height,
    )


def _to_rgb(image: Image.Image) -> Image.Image:
    """Flatten transparency onto white and convert to RGB."""
    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    return image.convert("RGB")
