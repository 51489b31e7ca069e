"""
Overlay drawing for comparison results.

The canvas is a desaturated copy of the input image so that highlighted seeds
and region outlines stand out in color.
"""

from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageOps

from ..logging import get_logger
from ..matching.geometry import BoundingBox, Point
from .image import ImageSaveError, RasterImage

logger = get_logger(__name__)

PALETTE: Tuple[Tuple[int, int, int], ...] = (
    (255, 0, 0),
    (0, 200, 0),
    (0, 0, 255),
    (255, 200, 0),
    (255, 0, 255),
    (0, 220, 220),
    (255, 128, 0),
    (128, 0, 255),
)

HIGHLIGHT_ALPHA = 0.5


def palette_color(color_index: int) -> Tuple[int, int, int]:
    return PALETTE[color_index % len(PALETTE)]


def initialize_output(image: RasterImage) -> Image.Image:
    """Return a grayscale RGB canvas the size of the image."""
    return ImageOps.grayscale(image.to_pil()).convert("RGB")


def highlight_seed(canvas: Image.Image, color_index: int, origin: Point, side: int) -> None:
    """Tint the side x side square at origin with the palette color."""
    box = (origin.x, origin.y, origin.x + side, origin.y + side)
    patch = canvas.crop(box)
    tint = Image.new("RGB", patch.size, palette_color(color_index))
    canvas.paste(Image.blend(patch, tint, HIGHLIGHT_ALPHA), box)


def draw_bounding_box(canvas: Image.Image, box: BoundingBox, color_index: int) -> None:
    draw = ImageDraw.Draw(canvas)
    draw.rectangle(
        (box.min.x, box.min.y, box.max.x, box.max.y),
        outline=palette_color(color_index),
    )


def save_output(canvas: Image.Image, path: Path) -> None:
    path = Path(path)
    try:
        canvas.save(path, format="PPM")
    except (OSError, ValueError) as exc:
        raise ImageSaveError(f"Failed to save visualization: {path}") from exc
    logger.debug(f"Wrote visualization to {path}")
