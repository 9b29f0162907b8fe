"""Side-by-side stereo compositing."""

from __future__ import annotations

from loguru import logger
from PIL import Image

from vrtools.errors import CompositeCreationError

# Canvas modes that can be written back out as JPEG
JPEG_MODES = ("L", "RGB", "CMYK")
FALLBACK_MODE = "RGB"


def vertical_offset(canvas_height: int, image_height: int) -> int:
    """Return the top offset that centres an image vertically (floor)."""
    return (canvas_height - image_height) // 2


def canvas_mode(image: Image.Image) -> str:
    """Return the colour mode for a canvas built around ``image``."""
    return image.mode if image.mode in JPEG_MODES else FALLBACK_MODE


def create_side_by_side(left: Image.Image, right: Image.Image) -> Image.Image:
    """Place two images next to each other, each centred vertically.

    The canvas is ``left.width + right.width`` wide and as tall as the
    taller image. Colour mode and ICC profile come from the left (primary)
    image; the right image is converted to match.

    Args:
        left: Left-eye (primary) image
        right: Right-eye image

    Returns:
        Composite image

    Raises:
        CompositeCreationError: If the canvas cannot be allocated or filled
    """
    width = left.width + right.width
    height = max(left.height, right.height)
    mode = canvas_mode(left)

    try:
        canvas = Image.new(mode, (width, height))
        canvas.paste(_as_mode(left, mode), (0, vertical_offset(height, left.height)))
        canvas.paste(_as_mode(right, mode), (left.width, vertical_offset(height, right.height)))
    except (ValueError, MemoryError, OSError) as e:
        raise CompositeCreationError() from e

    icc_profile = left.info.get("icc_profile")
    if icc_profile:
        canvas.info["icc_profile"] = icc_profile

    logger.debug("Composite {}x{} ({}) from {}x{} + {}x{}", width, height, mode, *left.size, *right.size)
    return canvas


def _as_mode(image: Image.Image, mode: str) -> Image.Image:
    return image if image.mode == mode else image.convert(mode)
