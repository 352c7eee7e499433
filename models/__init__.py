"""Data models: RGBA image grid, parameters, results and errors."""

from .errors import (
    PixelBufferError,
    BufferSizeMismatch,
    DimensionMismatch,
    InvalidParameter,
    PresentationFailure,
)
from .rgba_image import RgbaImage, Pixel
from .transform_params import TransformParams
from .transform_result import TransformResult

__all__ = [
    'PixelBufferError',
    'BufferSizeMismatch',
    'DimensionMismatch',
    'InvalidParameter',
    'PresentationFailure',
    'RgbaImage',
    'Pixel',
    'TransformParams',
    'TransformResult',
]
