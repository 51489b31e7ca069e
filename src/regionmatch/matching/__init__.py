"""
Duplicate-region matching between pairs of rasters.

Two engines share the seed model: a hash-table engine that aggregates every
confirmed seed match into one bounding box per image, and a brute-force
baseline that grows the first matching seed.
"""

from .geometry import Point, BoundingBox, MatchRegion
from .seed import ImageTag, Seed, seed_hash, confirm_match, extract_seeds
from .table import SeedTable
from .hashtable import hash_compare
from .simple import simple_compare
from .report import CompareResult, coverage_fraction, format_comparison

__all__ = [
    "Point",
    "BoundingBox",
    "MatchRegion",
    "ImageTag",
    "Seed",
    "seed_hash",
    "confirm_match",
    "extract_seeds",
    "SeedTable",
    "hash_compare",
    "simple_compare",
    "CompareResult",
    "coverage_fraction",
    "format_comparison",
]
