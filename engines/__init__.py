"""Pixel buffer transforms - pure computation, no I/O."""

from .grayscale import luma, grayscale
from .posterize import clamp_quality, round_half_away, quantize_channels, compress
from .merge import split_column, merge_half
from .pipeline import apply_grayscale, apply_compression, merge_half_images, process_image

__all__ = [
    'luma',
    'grayscale',
    'clamp_quality',
    'round_half_away',
    'quantize_channels',
    'compress',
    'split_column',
    'merge_half',
    'apply_grayscale',
    'apply_compression',
    'merge_half_images',
    'process_image',
]
