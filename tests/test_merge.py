"""Tests for horizontal half-merge."""

import numpy as np
import pytest
from models.rgba_image import RgbaImage
from models.errors import DimensionMismatch
from engines.merge import merge_half, split_column
from utils.test_images import generate_solid


def _solid(width, height, color):
    return RgbaImage.from_array(generate_solid(width, height, color))


RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 128)


def test_even_width_split():
    """Width 4: columns 0-1 from image1, 2-3 from image2, every row."""
    rng = np.random.default_rng(1)
    image1 = RgbaImage.from_array(rng.integers(0, 256, (3, 4, 4), dtype=np.uint8))
    image2 = RgbaImage.from_array(rng.integers(0, 256, (3, 4, 4), dtype=np.uint8))
    merged = merge_half(image1, image2)

    assert np.array_equal(merged.pixels[:, 0:2], image1.pixels[:, 0:2])
    assert np.array_equal(merged.pixels[:, 2:4], image2.pixels[:, 2:4])


def test_odd_width_right_half_gets_extra_column():
    """Width 5 splits at column 2."""
    merged = merge_half(_solid(5, 2, RED), _solid(5, 2, BLUE))
    row = [merged.get(x, 0) for x in range(5)]
    assert row == [RED, RED, BLUE, BLUE, BLUE]


def test_single_column_comes_from_second_image():
    """Width 1 splits at column 0."""
    merged = merge_half(_solid(1, 3, RED), _solid(1, 3, BLUE))
    assert all(merged.get(0, y) == BLUE for y in range(3))


@pytest.mark.parametrize('width, expected', [(0, 0), (1, 0), (4, 2), (5, 2), (7, 3)])
def test_split_column(width, expected):
    """Seam sits at width // 2."""
    assert split_column(width) == expected


def test_dimension_mismatch():
    """4x4 vs 4x3 is rejected."""
    with pytest.raises(DimensionMismatch) as exc_info:
        merge_half(_solid(4, 4, RED), _solid(4, 3, BLUE))
    assert exc_info.value.first == (4, 4)
    assert exc_info.value.second == (4, 3)


def test_width_mismatch():
    """Differing widths are rejected too."""
    with pytest.raises(DimensionMismatch):
        merge_half(_solid(4, 4, RED), _solid(3, 4, BLUE))


def test_inputs_not_mutated():
    """Neither source image is modified."""
    image1, image2 = _solid(4, 2, RED), _solid(4, 2, BLUE)
    merge_half(image1, image2)
    assert image1.get(3, 1) == RED
    assert image2.get(0, 0) == BLUE
