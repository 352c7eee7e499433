"""Shared utilities."""

from .constants import BYTES_PER_PIXEL, LUMA_WEIGHTS, MIN_QUALITY, OPERATIONS
from .metrics import compute_psnr_ssim, count_colors, Timer
from .test_images import (
    generate_solid,
    generate_rgba_gradient,
    generate_rgba_checkerboard,
    generate_gray_ramp,
)
from .image_io import load_rgba, save_rgba
from .log import setup_logging

__all__ = [
    'BYTES_PER_PIXEL',
    'LUMA_WEIGHTS',
    'MIN_QUALITY',
    'OPERATIONS',
    'compute_psnr_ssim',
    'count_colors',
    'Timer',
    'generate_solid',
    'generate_rgba_gradient',
    'generate_rgba_checkerboard',
    'generate_gray_ramp',
    'load_rgba',
    'save_rgba',
    'setup_logging',
]
