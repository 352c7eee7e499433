"""Presentation sinks: where finished RGBA buffers are shown or stored."""

import logging
from typing import List, Protocol, Tuple

import cv2
import numpy as np

from models.errors import PresentationFailure
from utils.constants import BYTES_PER_PIXEL
from utils.image_io import save_rgba

logger = logging.getLogger(__name__)

Frame = Tuple[int, int, bytes]


class PresentationSink(Protocol):
    """Receives a finished width x height RGBA buffer."""

    def present(self, width: int, height: int, rgba: bytes) -> None:
        ...


class NullSink:
    """Discards every frame."""

    def present(self, width: int, height: int, rgba: bytes) -> None:
        pass


class BufferCaptureSink:
    """Keeps every presented frame, most recent last."""

    def __init__(self):
        self.frames: List[Frame] = []

    def present(self, width: int, height: int, rgba: bytes) -> None:
        self.frames.append((width, height, bytes(rgba)))

    @property
    def last(self) -> Frame:
        if not self.frames:
            raise LookupError("No frame has been presented")
        return self.frames[-1]


class ImageFileSink:
    """Writes each frame to an image file (format chosen by extension)."""

    def __init__(self, path: str):
        self.path = path

    def present(self, width: int, height: int, rgba: bytes) -> None:
        if width == 0 or height == 0:
            raise PresentationFailure(f"Cannot write empty {width}x{height} image to {self.path}")
        image = np.frombuffer(rgba, dtype=np.uint8).reshape(height, width, BYTES_PER_PIXEL)
        try:
            save_rgba(image, self.path)
        except (ValueError, cv2.error) as e:
            raise PresentationFailure(str(e)) from e
        logger.info("Wrote %dx%d image to %s", width, height, self.path)
