"""Metrics: PSNR, SSIM, colour counts and timing."""

import time
import numpy as np
from skimage.metrics import mean_squared_error, peak_signal_noise_ratio, structural_similarity
from typing import Dict

# structural_similarity's default window
SSIM_MIN_SIDE = 7


def compute_psnr_ssim(original_rgba: np.ndarray, processed_rgba: np.ndarray) -> Dict[str, float]:
    """Compute PSNR and SSIM over the RGB channels (alpha ignored)."""
    original_rgb = original_rgba[:, :, :3]
    processed_rgb = processed_rgba[:, :, :3]

    if original_rgb.size == 0:
        return {'psnr': float('nan'), 'ssim': float('nan')}

    # Identical images: skip the divide-by-zero inside skimage
    if mean_squared_error(original_rgb, processed_rgb) == 0:
        psnr = float('inf')
    else:
        psnr = float(peak_signal_noise_ratio(original_rgb, processed_rgb, data_range=255))

    if min(original_rgb.shape[:2]) < SSIM_MIN_SIDE:
        ssim = float('nan')
    else:
        ssim = float(structural_similarity(
            original_rgb, processed_rgb, channel_axis=2, data_range=255
        ))

    return {'psnr': psnr, 'ssim': ssim}


def count_colors(rgba: np.ndarray) -> int:
    """Number of distinct RGB triples."""
    rgb = rgba[:, :, :3].reshape(-1, 3)
    if rgb.size == 0:
        return 0
    return int(np.unique(rgb, axis=0).shape[0])


class Timer:
    """Simple timer for transform runtime."""

    def __init__(self):
        self.elapsed_ms = 0.0

    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result
