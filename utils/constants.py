"""Shared constants for RGBA buffer transforms."""

import numpy as np

BYTES_PER_PIXEL = 4

# ITU-R BT.601 luma weights, single precision
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float32)

# Lower bound for the posterization factor
MIN_QUALITY = 0.1

OPERATIONS = ('grayscale', 'compress', 'merge')
