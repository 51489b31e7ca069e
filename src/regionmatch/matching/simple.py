"""
Brute-force baseline: exhaustive seed search plus greedy growth.

Slow and approximate. It reports the first matching seed in search order and
grows it width first, then height, which can miss a larger shared rectangle.
"""

from typing import Iterator, Optional, Tuple

from ..logging import get_logger
from ..raster.image import Raster
from .geometry import BoundingBox, MatchRegion, Point
from .report import CompareResult, coverage_fraction

logger = get_logger(__name__)


def search_origins(image: Raster, side: int) -> Iterator[Point]:
    """Every origin where a full window fits, up to the last row and column."""
    if side < 1:
        raise ValueError(f"Seed side must be positive, got {side}")
    for i in range(image.width - side + 1):
        for j in range(image.height - side + 1):
            yield Point(i, j)


def clamp_box(origin: Point, width: int, height: int, image: Raster) -> BoundingBox:
    """Box reaching origin + (width, height), kept inside the image."""
    corner = Point(
        min(origin.x + width, image.width - 1),
        min(origin.y + height, image.height - 1),
    )
    return BoundingBox(origin, corner)


def windows_equal(image_a: Raster, a: Point, image_b: Raster, b: Point, side: int) -> bool:
    for dy in range(side):
        for dx in range(side):
            if image_a.pixel(a.x + dx, a.y + dy) != image_b.pixel(b.x + dx, b.y + dy):
                return False
    return True


def find_first_seed(image_a: Raster, image_b: Raster, side: int) -> Optional[Tuple[Point, Point]]:
    """Return the first (origin in A, origin in B) whose windows are equal."""
    origins_b = list(search_origins(image_b, side))
    for origin_a in search_origins(image_a, side):
        for origin_b in origins_b:
            if windows_equal(image_a, origin_a, image_b, origin_b, side):
                return origin_a, origin_b
    return None


def grow_region(image_a: Raster, a: Point, image_b: Raster, b: Point, side: int) -> Tuple[int, int]:
    """
    Grow a matched seed into a rectangle, returning (width, height).

    Width is grown along the base row until a pixel differs or either image's
    right edge is near; height is then grown along the base column the same
    way.
    """
    width = side
    while width < image_a.width - a.x - 1 and width < image_b.width - b.x - 1:
        if image_a.pixel(a.x + width, a.y) != image_b.pixel(b.x + width, b.y):
            break
        width += 1

    height = side
    while height < image_a.height - a.y - 1 and height < image_b.height - b.y - 1:
        if image_a.pixel(a.x, a.y + height) != image_b.pixel(b.x, b.y + height):
            break
        height += 1

    return width, height


def simple_compare(image_a: Raster, image_b: Raster, side: int) -> CompareResult:
    """Compare two images with the exhaustive baseline; yields at most one region."""
    found = find_first_seed(image_a, image_b, side)
    if found is None:
        logger.debug("No matching seed between images")
        return CompareResult()

    origin_a, origin_b = found
    width, height = grow_region(image_a, origin_a, image_b, origin_b, side)
    logger.debug(f"Seed at {origin_a} / {origin_b} grown to {width}x{height}")

    box_a = clamp_box(origin_a, width, height, image_a)
    box_b = clamp_box(origin_b, width, height, image_b)
    return CompareResult(
        fraction=coverage_fraction(box_a, image_a),
        regions=[MatchRegion(box_a, box_b)],
        seeds=[origin_a],
    )
