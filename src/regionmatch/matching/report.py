"""Coverage fractions and the text rendering of comparison results."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..raster.image import Raster
from .geometry import BoundingBox, MatchRegion, Point


@dataclass(frozen=True)
class CompareResult:
    """Outcome of comparing image A against image B."""
    fraction: float = 0.0
    regions: List[MatchRegion] = field(default_factory=list)
    # Matched seed origins in image A
    seeds: List[Point] = field(default_factory=list)

    @property
    def matched(self) -> bool:
        return bool(self.regions)


def coverage_fraction(box_a: BoundingBox, image_a: Raster) -> float:
    """Share of image A covered by box_a; never measured against image B."""
    return box_a.area() / float(image_a.width * image_a.height)


def format_box(box: BoundingBox) -> str:
    return f"({box.min.x},{box.min.y})-({box.max.x},{box.max.y})"


def format_comparison(name_b: str, result: CompareResult) -> str:
    """Render one result line: percentage, other filename, then each region."""
    line = f"{100.0 * result.fraction:>7.1f}% match with {name_b:<20}"
    for region in result.regions:
        line += f"   {format_box(region.box_a)} similar to {format_box(region.box_b)}"
    return line


def output_path(image_path: Path, out_dir: Path) -> Path:
    """Visualization file for an input image, e.g. ``a.png`` -> ``output_a.ppm``."""
    return Path(out_dir) / f"output_{Path(image_path).stem}.ppm"
