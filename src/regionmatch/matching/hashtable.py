"""Hash-assisted matching between two rasters."""

from typing import List, Tuple

from ..logging import get_logger
from ..raster.image import Raster
from .geometry import BoxAccumulator, MatchRegion
from .report import CompareResult, coverage_fraction
from .seed import ImageTag, Seed, confirm_match
from .table import SeedTable

logger = get_logger(__name__)


def _group_by_content(entries: List[Seed]) -> List[Tuple[Seed, List[Seed], List[Seed]]]:
    """
    Split a bucket into groups of identical windows.

    Each group is (representative, seeds from A, seeds from B). Membership is
    decided by full comparison with the representative, so hash collisions
    between different windows end up in separate groups.
    """
    groups: List[Tuple[Seed, List[Seed], List[Seed]]] = []
    for entry in entries:
        for representative, from_a, from_b in groups:
            if confirm_match(representative, entry):
                (from_a if entry.owner is ImageTag.A else from_b).append(entry)
                break
        else:
            from_a, from_b = [], []
            (from_a if entry.owner is ImageTag.A else from_b).append(entry)
            groups.append((entry, from_a, from_b))
    return groups


def hash_compare(
    image_a: Raster,
    image_b: Raster,
    side: int,
    table_size: int = 1_000_000,
    compare_fraction: float = 0.05,
) -> CompareResult:
    """
    Find content duplicated between two images through a shared seed table.

    Every seed of both images is hashed into one table, a leading fraction of
    its buckets is scanned, and each cross-image pair with identical windows
    extends a running bounding box per image. The result holds at most one
    region: the union of every confirmed placement.

    Args:
        image_a: Image the coverage fraction is measured against
        image_b: Image searched for duplicated content
        side: Seed window side length in pixels
        table_size: Target bucket count of the table
        compare_fraction: Share of the target bucket count to scan, in (0, 1]

    Returns:
        CompareResult with the fraction, region list and matched A seeds
    """
    table = SeedTable(table_size)
    table.populate(image_a, side, ImageTag.A)
    table.populate(image_b, side, ImageTag.B)
    logger.debug(
        f"Seed table holds {len(table)} seeds in {table.bucket_count()} buckets, "
        f"scanning the first {table.scan_limit(compare_fraction)}/{table.target_buckets}"
    )

    box_a = BoxAccumulator()
    box_b = BoxAccumulator()
    matched_seeds = []
    confirmed = 0

    for _, entries in table.scan(compare_fraction):
        if len(entries) < 2:
            continue
        for _, from_a, from_b in _group_by_content(entries):
            if not from_a or not from_b:
                continue
            # Every A seed pairs with every B seed of identical content
            confirmed += len(from_a) * len(from_b)
            for seed in from_a:
                box_a.add(seed.origin, side)
                matched_seeds.append(seed.origin)
            for seed in from_b:
                box_b.add(seed.origin, side)

    if box_a.is_empty():
        logger.debug("No confirmed seed matches")
        return CompareResult()

    region = MatchRegion(box_a.box(), box_b.box())
    logger.debug(f"Confirmed {confirmed} seed pairs, region {region.box_a} / {region.box_b}")
    return CompareResult(
        fraction=coverage_fraction(region.box_a, image_a),
        regions=[region],
        seeds=matched_seeds,
    )
