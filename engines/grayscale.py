"""Perceptual grayscale conversion."""

import numpy as np

from models.rgba_image import RgbaImage
from utils.constants import LUMA_WEIGHTS


def luma(rgb: np.ndarray) -> np.ndarray:
    """BT.601 luma in float32, summed left to right (R, G, B)."""
    rgb = rgb.astype(np.float32)
    return (
        rgb[..., 0] * LUMA_WEIGHTS[0]
        + rgb[..., 1] * LUMA_WEIGHTS[1]
        + rgb[..., 2] * LUMA_WEIGHTS[2]
    )


def grayscale(image: RgbaImage) -> RgbaImage:
    """Replace R, G and B with truncated luma; alpha passes through."""
    # Truncate toward zero, saturating at 255
    gray = np.clip(luma(image.pixels), 0, 255).astype(np.uint8)

    output = RgbaImage.new_blank(image.width, image.height)
    output.pixels[..., 0] = gray
    output.pixels[..., 1] = gray
    output.pixels[..., 2] = gray
    output.pixels[..., 3] = image.pixels[..., 3]
    return output
