"""Seed blocks: fixed-size pixel windows keyed by a content hash."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from ..raster.image import Raster
from .geometry import Point

HASH_INITIAL = 1315423911
HASH_MASK = 0xFFFFFFFF


class ImageTag(Enum):
    """Which side of a comparison a seed was sampled from."""
    A = "a"
    B = "b"


def seed_hash(values: Tuple[int, ...]) -> int:
    """
    Hash a window's pixel values as an unsigned 32-bit integer.

    The position and owner of the window do not take part, so equal content
    sampled from two images lands in the same bucket.
    """
    h = HASH_INITIAL
    for value in values:
        h ^= ((h << 5) + value + (h >> 2)) & HASH_MASK
    return h & HASH_MASK


@dataclass(frozen=True)
class Seed:
    origin: Point
    values: Tuple[int, ...]
    owner: ImageTag

    def content_hash(self) -> int:
        return seed_hash(self.values)


def confirm_match(a: Seed, b: Seed) -> bool:
    """Return True only when every position of both windows is equal."""
    if len(a.values) != len(b.values):
        return False
    return all(x == y for x, y in zip(a.values, b.values))


def seed_origins(image: Raster, side: int) -> Iterator[Point]:
    """
    Yield every seed origin of an image, x outer and y inner.

    The origin range stops one short of the last full window, so a side equal
    to or larger than either dimension yields nothing.
    """
    if side < 1:
        raise ValueError(f"Seed side must be positive, got {side}")
    for i in range(image.width - side):
        for j in range(image.height - side):
            yield Point(i, j)


def window_values(image: Raster, origin: Point, side: int) -> Tuple[int, ...]:
    """Sample a side x side window row by row."""
    return tuple(
        image.pixel(origin.x + dx, origin.y + dy)
        for dy in range(side)
        for dx in range(side)
    )


def extract_seeds(image: Raster, side: int, owner: ImageTag) -> Iterator[Seed]:
    for origin in seed_origins(image, side):
        yield Seed(origin, window_values(image, origin, side), owner)
