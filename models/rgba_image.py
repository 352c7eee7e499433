"""RGBA pixel grid backed by a numpy array."""

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from models.errors import BufferSizeMismatch, InvalidParameter
from utils.constants import BYTES_PER_PIXEL

Pixel = Tuple[int, int, int, int]
BufferLike = Union[bytes, bytearray, memoryview, np.ndarray]


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise InvalidParameter(f"Width and height must be non-negative, got {width}x{height}")


def buffer_length(buffer: BufferLike) -> int:
    """Length in bytes of a bytes-like object or uint8 array."""
    if isinstance(buffer, np.ndarray):
        return buffer.size
    return memoryview(buffer).nbytes


@dataclass(eq=False)
class RgbaImage:
    """
    Row-major RGBA image, 4 bytes per pixel.

    `pixels` has shape (height, width, 4) and dtype uint8. Instances own
    their array: constructors copy the caller's buffer, so a transform can
    never write through to the source bytes.
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self):
        _check_dimensions(self.width, self.height)
        expected_shape = (self.height, self.width, BYTES_PER_PIXEL)
        if self.pixels.shape != expected_shape:
            raise InvalidParameter(
                f"Pixel array shape {self.pixels.shape} does not match {expected_shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise InvalidParameter(f"Pixel array must be uint8, got {self.pixels.dtype}")

    @classmethod
    def from_raw(cls, width: int, height: int, buffer: BufferLike) -> 'RgbaImage':
        """Build an image from a flat RGBA buffer of exactly width*height*4 bytes."""
        _check_dimensions(width, height)
        expected = width * height * BYTES_PER_PIXEL

        if isinstance(buffer, np.ndarray):
            if buffer.dtype != np.uint8:
                raise InvalidParameter(f"Buffer array must be uint8, got {buffer.dtype}")
            data = buffer.reshape(-1)
        else:
            data = np.frombuffer(buffer, dtype=np.uint8)

        if data.size != expected:
            raise BufferSizeMismatch(width, height, expected, data.size)

        pixels = data.reshape(height, width, BYTES_PER_PIXEL).copy()
        return cls(width, height, pixels)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'RgbaImage':
        """Wrap (a copy of) an (H, W, 4) uint8 array."""
        if array.ndim != 3 or array.shape[2] != BYTES_PER_PIXEL:
            raise InvalidParameter(f"Expected an (H, W, 4) array, got shape {array.shape}")
        height, width = array.shape[:2]
        return cls(width, height, np.array(array, dtype=np.uint8, copy=True))

    @classmethod
    def new_blank(cls, width: int, height: int) -> 'RgbaImage':
        """Transparent black image."""
        _check_dimensions(width, height)
        return cls(width, height, np.zeros((height, width, BYTES_PER_PIXEL), dtype=np.uint8))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.width, self.height

    def same_dimensions(self, other: 'RgbaImage') -> bool:
        return self.width == other.width and self.height == other.height

    def _check_coordinates(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )

    def get(self, x: int, y: int) -> Pixel:
        self._check_coordinates(x, y)
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        self._check_coordinates(x, y)
        if len(pixel) != BYTES_PER_PIXEL or any(not 0 <= c <= 255 for c in pixel):
            raise ValueError(f"Pixel must be four values in 0..255, got {pixel}")
        self.pixels[y, x] = pixel

    def flatten(self) -> bytes:
        """Row-major RGBA bytes."""
        return self.pixels.tobytes()
