"""Tests for the hash-table matching engine."""

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from regionmatch.matching.geometry import BoundingBox, Point
from regionmatch.matching.hashtable import _group_by_content, hash_compare
from regionmatch.matching.seed import ImageTag, Seed
from tests.helpers.raster_factory import gradient_array, paste, raster, uniform_array


def embedded_pair():
    """A 6x6 block of A at (3,4) copied into B at (10,9); nothing else shared."""
    a = gradient_array(20, 20)
    b = paste(gradient_array(20, 20, base=10_000), a, 3, 4, 10, 9, 6, 6)
    return raster(a), raster(b)


class TestIdenticalImages:
    @pytest.mark.parametrize("side", [1, 2, 3, 5, 7])
    def test_uniform_image_against_itself_fully_covered(self, side):
        image = raster(uniform_array(8, 8))
        result = hash_compare(image, image, side, table_size=1000, compare_fraction=1.0)
        assert result.fraction == 1.0
        assert len(result.regions) == 1
        region = result.regions[0]
        assert region.box_a == BoundingBox(Point(0, 0), Point(7, 7))
        assert region.box_b == region.box_a

    def test_side_filling_image_finds_nothing(self):
        image = raster(uniform_array(8, 8))
        result = hash_compare(image, image, 8, table_size=1000, compare_fraction=1.0)
        assert result.fraction == 0.0
        assert result.regions == []


class TestNoSharedContent:
    def test_disjoint_images_report_zero(self):
        a = raster(gradient_array(12, 12))
        b = raster(gradient_array(12, 12, base=5_000))
        result = hash_compare(a, b, 3, table_size=100, compare_fraction=1.0)
        assert result.fraction == 0.0
        assert result.regions == []
        assert result.seeds == []
        assert not result.matched

    def test_repeated_content_within_one_image_is_not_a_match(self):
        a = raster(uniform_array(10, 10, value=1))
        b = raster(uniform_array(10, 10, value=2))
        result = hash_compare(a, b, 2, table_size=10, compare_fraction=1.0)
        assert result.regions == []


class TestEmbeddedBlock:
    def test_boxes_cover_every_matched_placement(self):
        a, b = embedded_pair()
        result = hash_compare(a, b, 3, table_size=1000, compare_fraction=1.0)
        region = result.regions[0]
        assert region.box_a == BoundingBox(Point(3, 4), Point(9, 10))
        assert region.box_b == BoundingBox(Point(10, 9), Point(16, 15))

    def test_fraction_relative_to_image_a(self):
        a, b = embedded_pair()
        result = hash_compare(a, b, 3, table_size=1000, compare_fraction=1.0)
        assert result.fraction == pytest.approx(49 / 400)

    def test_matched_seeds_are_origins_in_a(self):
        a, b = embedded_pair()
        result = hash_compare(a, b, 3, table_size=1000, compare_fraction=1.0)
        assert sorted((p.x, p.y) for p in result.seeds) == [
            (x, y) for x in range(3, 7) for y in range(4, 8)
        ]

    def test_swapped_images_measure_against_new_a(self):
        a = raster(uniform_array(10, 10))
        b = raster(uniform_array(6, 6))
        forward = hash_compare(a, b, 2, table_size=100, compare_fraction=1.0)
        backward = hash_compare(b, a, 2, table_size=100, compare_fraction=1.0)
        assert forward.regions[0].box_a == BoundingBox(Point(0, 0), Point(9, 9))
        assert forward.regions[0].box_b == BoundingBox(Point(0, 0), Point(5, 5))
        assert forward.fraction == 1.0
        assert backward.regions[0].box_a == BoundingBox(Point(0, 0), Point(5, 5))
        assert backward.fraction == 1.0


class TestScanFraction:
    def test_default_settings_cover_identical_images(self):
        image = raster(uniform_array(8, 8))
        result = hash_compare(image, image, 2)
        assert result.fraction == 1.0
        assert result.regions[0].box_a == BoundingBox(Point(0, 0), Point(7, 7))

    def test_default_settings_find_embedded_block(self):
        a, b = embedded_pair()
        result = hash_compare(a, b, 3)
        assert result.regions[0].box_b == BoundingBox(Point(10, 9), Point(16, 15))

    def test_scan_limited_to_leading_buckets(self):
        """Only A's first bucket is visited, and it holds no shared content."""
        a, b = embedded_pair()
        result = hash_compare(a, b, 3, table_size=10, compare_fraction=0.1)
        assert result.regions == []

    def test_fraction_below_one_bucket_scans_nothing(self):
        a, b = embedded_pair()
        result = hash_compare(a, b, 3, table_size=1_000_000, compare_fraction=0.0000001)
        assert result.fraction == 0.0
        assert result.regions == []

    @settings(max_examples=25, deadline=None)
    @given(
        seed=st.integers(min_value=0, max_value=2**32 - 1),
        fraction=st.floats(min_value=0.01, max_value=1.0),
    )
    def test_full_scan_finds_everything_a_partial_scan_finds(self, seed, fraction):
        rng = np.random.default_rng(seed)
        a = raster(rng.integers(0, 2, size=(9, 9)))
        b = raster(rng.integers(0, 2, size=(9, 9)))
        partial = hash_compare(a, b, 2, table_size=16, compare_fraction=fraction)
        full = hash_compare(a, b, 2, table_size=16, compare_fraction=1.0)
        assert set(partial.seeds) <= set(full.seeds)
        if partial.matched:
            assert full.matched
            assert full.fraction >= partial.fraction


class TestBoxInvariants:
    @settings(max_examples=25, deadline=None)
    @given(seed=st.integers(min_value=0, max_value=2**32 - 1), side=st.integers(1, 4))
    def test_boxes_well_formed_and_inside_images(self, seed, side):
        rng = np.random.default_rng(seed)
        a = raster(rng.integers(0, 3, size=(10, 8)))
        b = raster(rng.integers(0, 3, size=(7, 9)))
        result = hash_compare(a, b, side, table_size=50, compare_fraction=1.0)
        assert 0.0 <= result.fraction <= 1.0
        for region in result.regions:
            for box, image in ((region.box_a, a), (region.box_b, b)):
                assert box.min.x <= box.max.x
                assert box.min.y <= box.max.y
                assert box.max.x < image.width
                assert box.max.y < image.height


class TestGroupByContent:
    def test_colliding_windows_kept_apart(self):
        """Entries in one bucket with different content never confirm each other."""
        entries = [
            Seed(Point(0, 0), (1, 2), ImageTag.A),
            Seed(Point(1, 1), (3, 4), ImageTag.B),
            Seed(Point(2, 2), (1, 2), ImageTag.B),
        ]
        groups = _group_by_content(entries)
        assert len(groups) == 2
        first, from_a, from_b = groups[0]
        assert first.values == (1, 2)
        assert [s.origin for s in from_a] == [Point(0, 0)]
        assert [s.origin for s in from_b] == [Point(2, 2)]
        _, lone_a, lone_b = groups[1]
        assert lone_a == []
        assert [s.origin for s in lone_b] == [Point(1, 1)]

    def test_invalid_side_rejected(self):
        image = raster(uniform_array(4, 4))
        with pytest.raises(ValueError):
            hash_compare(image, image, 0)
