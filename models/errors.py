"""Error types raised by the pixel buffer transforms."""

from typing import Tuple


class PixelBufferError(Exception):
    """Base class for every error raised by this library."""


class BufferSizeMismatch(PixelBufferError, ValueError):
    """Buffer length does not equal width * height * 4."""

    def __init__(self, width: int, height: int, expected: int, actual: int):
        self.width = width
        self.height = height
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Buffer of {actual} bytes does not match {width}x{height} RGBA "
            f"(expected {expected} bytes)"
        )


class DimensionMismatch(PixelBufferError, ValueError):
    """Two images that must share dimensions do not."""

    def __init__(self, first: Tuple[int, int], second: Tuple[int, int]):
        self.first = first
        self.second = second
        super().__init__(
            f"Image dimensions differ: {first[0]}x{first[1]} vs {second[0]}x{second[1]}"
        )


class InvalidParameter(PixelBufferError, ValueError):
    """Argument outside its valid domain (negative size, non-finite quality, ...)."""


class PresentationFailure(PixelBufferError, RuntimeError):
    """The presentation sink could not show or store a finished buffer."""
