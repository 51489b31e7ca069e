"""
Multi-entry hash index over seeds.

Each distinct content hash owns a bucket: the list of seeds carrying that hash,
in insertion order. The table is sized by a target bucket count; scanning a
fraction of the table visits the first ``floor(target * fraction)`` buckets in
the order their hashes were first inserted.
"""

import math
from typing import Dict, Iterator, List, Tuple

from ..logging import get_logger
from ..raster.image import Raster
from .seed import ImageTag, Seed, extract_seeds

logger = get_logger(__name__)


class SeedTable:
    def __init__(self, target_buckets: int) -> None:
        if target_buckets < 1:
            raise ValueError(f"Target bucket count must be positive, got {target_buckets}")
        self._target_buckets = target_buckets
        self._buckets: Dict[int, List[Seed]] = {}
        self._size = 0

    @property
    def target_buckets(self) -> int:
        return self._target_buckets

    def __len__(self) -> int:
        return self._size

    def bucket_count(self) -> int:
        """Number of distinct content hashes stored."""
        return len(self._buckets)

    def insert(self, seed: Seed) -> None:
        self._buckets.setdefault(seed.content_hash(), []).append(seed)
        self._size += 1

    def populate(self, image: Raster, side: int, owner: ImageTag) -> int:
        """Insert every seed of an image; returns how many were added."""
        added = 0
        for seed in extract_seeds(image, side, owner):
            self.insert(seed)
            added += 1
        logger.debug(f"Inserted {added} seeds for image {owner.name}")
        return added

    def bucket(self, key: int) -> List[Seed]:
        """Entries sharing a content hash, in insertion order."""
        return list(self._buckets.get(key, ()))

    def scan_limit(self, fraction: float) -> int:
        """How many leading buckets a scan of the given fraction covers."""
        if not 0.0 < fraction <= 1.0:
            raise ValueError(f"Scan fraction must be in (0, 1], got {fraction}")
        return math.floor(self._target_buckets * fraction)

    def scan(self, fraction: float) -> Iterator[Tuple[int, List[Seed]]]:
        """
        Yield (hash, entries) for the first buckets in insertion order.

        The scan is a prefix of the key order, so a larger fraction always
        visits a superset of what a smaller one visits.
        """
        limit = self.scan_limit(fraction)
        for index, (key, entries) in enumerate(self._buckets.items()):
            if index >= limit:
                break
            yield key, entries
