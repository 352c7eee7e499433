"""
Quantization-style "compression" (posterization).

Each colour channel goes through round(v * factor) / factor. This only
reduces channel precision to multiples of 1/factor; the buffer keeps its
size and nothing is entropy coded. factor values around 1.0 and above leave
channels unchanged, small factors collapse them into coarse bands, and
values rounded up past 255 saturate.
"""

import numpy as np

from models.errors import InvalidParameter
from models.rgba_image import RgbaImage
from utils.constants import MIN_QUALITY


def clamp_quality(quality: float) -> float:
    """Raise quality to MIN_QUALITY; there is no upper bound."""
    with np.errstate(over='ignore'):
        single = np.float32(quality)
    if not np.isfinite(single):
        raise InvalidParameter(f"Quality must be a finite single-precision number, got {quality}")
    return max(float(quality), MIN_QUALITY)


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to nearest integer, ties away from zero (np.round rounds ties to even)."""
    floor = np.floor(values)
    return floor + (values - floor >= 0.5)


def quantize_channels(rgb: np.ndarray, factor: float) -> np.ndarray:
    factor = np.float32(factor)
    # Large factors overflow to inf, which saturates below
    with np.errstate(over='ignore', invalid='ignore'):
        scaled = rgb.astype(np.float32) * factor
        restored = round_half_away(scaled).astype(np.float32) / factor
    return np.clip(restored, 0, 255).astype(np.uint8)


def compress(image: RgbaImage, quality: float) -> RgbaImage:
    """Posterize R, G and B by the clamped quality factor; alpha passes through."""
    factor = clamp_quality(quality)

    output = RgbaImage.new_blank(image.width, image.height)
    output.pixels[..., :3] = quantize_channels(image.pixels[..., :3], factor)
    output.pixels[..., 3] = image.pixels[..., 3]
    return output
