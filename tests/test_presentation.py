"""Tests for presentation sinks and image I/O."""

import numpy as np
import pytest
from models.errors import PresentationFailure
from utils.presentation import BufferCaptureSink, ImageFileSink, NullSink
from utils.image_io import load_rgba
from utils.test_images import generate_rgba_checkerboard


def test_null_sink_accepts_frames():
    """Null sink takes any frame without complaint."""
    NullSink().present(1, 1, bytes(4))


def test_capture_sink_records_frames_in_order():
    """Capture sink keeps every frame, most recent last."""
    sink = BufferCaptureSink()
    sink.present(1, 1, bytearray([1, 2, 3, 4]))
    sink.present(1, 1, bytes([5, 6, 7, 8]))
    assert len(sink.frames) == 2
    assert sink.last == (1, 1, bytes([5, 6, 7, 8]))


def test_capture_sink_empty():
    """Asking for the last frame before any was presented fails."""
    with pytest.raises(LookupError):
        BufferCaptureSink().last


def test_file_sink_writes_png(tmp_path):
    """PNG keeps RGBA, including alpha, losslessly."""
    image = generate_rgba_checkerboard(32, 8)
    path = str(tmp_path / "frame.png")
    ImageFileSink(path).present(32, 32, image.tobytes())
    assert np.array_equal(load_rgba(path), image)


def test_file_sink_unknown_extension(tmp_path):
    """OpenCV refusing the extension surfaces as a presentation failure."""
    sink = ImageFileSink(str(tmp_path / "frame.notaformat"))
    with pytest.raises(PresentationFailure):
        sink.present(2, 2, bytes(16))


def test_file_sink_empty_image(tmp_path):
    """Zero-sized frames can not be written to an image file."""
    with pytest.raises(PresentationFailure):
        ImageFileSink(str(tmp_path / "empty.png")).present(0, 0, b'')


def test_load_rgba_missing_file(tmp_path):
    """Unreadable paths raise ValueError."""
    with pytest.raises(ValueError):
        load_rgba(str(tmp_path / "missing.png"))
