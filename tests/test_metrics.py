"""Tests for quality metrics."""

import math

import numpy as np
import pytest
from utils.metrics import compute_psnr_ssim, count_colors, Timer
from utils.test_images import generate_rgba_gradient, generate_solid


def test_identical_images():
    """Identical images give infinite PSNR and SSIM of 1."""
    image = generate_rgba_gradient(32, 32)
    metrics = compute_psnr_ssim(image, image.copy())
    assert math.isinf(metrics['psnr'])
    assert metrics["ssim"] == pytest.approx(1.0)


def test_alpha_ignored():
    """Only RGB is compared."""
    image = generate_rgba_gradient(32, 32)
    other = image.copy()
    other[..., 3] = 0
    assert math.isinf(compute_psnr_ssim(image, other)['psnr'])


def test_ssim_undefined_for_tiny_images():
    """SSIM is NaN below the 7x7 window, PSNR is still reported."""
    image = generate_solid(4, 4, (10, 20, 30, 255))
    other = generate_solid(4, 4, (12, 20, 30, 255))
    metrics = compute_psnr_ssim(image, other)
    assert math.isnan(metrics['ssim'])
    assert metrics['psnr'] > 0


def test_count_colors():
    """Distinct RGB triples are counted, alpha ignored."""
    image = generate_solid(4, 4, (1, 2, 3, 255))
    image[0, 0] = (9, 9, 9, 0)
    assert count_colors(image) == 2
    assert count_colors(np.zeros((0, 0, 4), dtype=np.uint8)) == 0


def test_timer():
    """Timer returns the wrapped result and records elapsed time."""
    timer = Timer()
    assert timer.measure(sum, [1, 2, 3]) == 6
    assert timer.elapsed_ms >= 0.0
