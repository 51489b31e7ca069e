from __future__ import annotations

from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..logging import get_logger

logger = get_logger(__name__)


class ImageLoadError(Exception):
    """Raised when an image cannot be read from disk."""


class ImageSaveError(Exception):
    """Raised when an image cannot be written to disk."""


class Raster(Protocol):
    """Read-only pixel lookup used by the matching engines."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def pixel(self, x: int, y: int) -> int: ...


def pack_rgb(rgb: np.ndarray) -> np.ndarray:
    """Pack an (H, W, 3) uint8 array into (H, W) integers of the form 0xRRGGBB."""
    rgb = rgb.astype(np.int64)
    return (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]


def unpack_rgb(packed: np.ndarray) -> np.ndarray:
    """Inverse of pack_rgb."""
    channels = [(packed >> shift) & 0xFF for shift in (16, 8, 0)]
    return np.stack(channels, axis=-1).astype(np.uint8)


class RasterImage:
    """
    Immutable raster of packed RGB pixels.

    Pixels are addressed as (x, y) with x along the width. The backing array
    is marked read-only so comparisons can never mutate it.
    """

    def __init__(self, pixels: np.ndarray, source: Path | None = None) -> None:
        if pixels.ndim != 2:
            raise ValueError(f"Expected a 2-D pixel array, got shape {pixels.shape}")
        self._pixels = np.array(pixels, dtype=np.int64)
        self._pixels.setflags(write=False)
        self._source = source

    @classmethod
    def from_array(cls, array) -> RasterImage:
        """Build a raster from a (H, W) integer array or an (H, W, 3) RGB array."""
        array = np.asarray(array)
        if array.ndim == 3:
            return cls(pack_rgb(array))
        return cls(array)

    @classmethod
    def load(cls, path: Path | str) -> RasterImage:
        path = Path(path)
        if not path.exists():
            raise ImageLoadError(f"Image file does not exist: {path}")

        try:
            with Image.open(path) as img:
                rgb = np.asarray(img.convert("RGB"))
        except (OSError, UnidentifiedImageError) as exc:
            raise ImageLoadError(f"Failed to load image: {path}") from exc

        logger.debug(f"Loaded {path} ({rgb.shape[1]}x{rgb.shape[0]})")
        return cls(pack_rgb(rgb), source=path)

    def save(self, path: Path | str) -> None:
        path = Path(path)
        try:
            self.to_pil().save(path)
        except (OSError, ValueError) as exc:
            raise ImageSaveError(f"Failed to save image: {path}") from exc

    @property
    def source(self) -> Path | None:
        return self._source

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def pixel(self, x: int, y: int) -> int:
        return int(self._pixels[y, x])

    def to_pil(self) -> Image.Image:
        """Return an RGB Pillow copy of the raster."""
        return Image.fromarray(unpack_rgb(self._pixels))
