"""Image I/O using OpenCV."""

import cv2
import numpy as np


def load_rgba(path: str) -> np.ndarray:
    """Load image as RGBA uint8, whatever its channel count or bit depth."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")

    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        raise ValueError(f"Unsupported pixel type {img.dtype} in {path}")

    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)


def save_rgba(image: np.ndarray, path: str) -> None:
    """Save RGBA image."""
    if not cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)):
        raise ValueError(f"Could not write image to {path}")
