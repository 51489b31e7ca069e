"""Raster loading and overlay drawing collaborators."""

from .image import RasterImage, Raster, ImageLoadError, ImageSaveError
from .visualization import initialize_output, highlight_seed, draw_bounding_box, save_output

__all__ = [
    "RasterImage",
    "Raster",
    "ImageLoadError",
    "ImageSaveError",
    "initialize_output",
    "highlight_seed",
    "draw_bounding_box",
    "save_output",
]
