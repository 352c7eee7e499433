"""Host entry points: flat RGBA buffers in, flat RGBA buffers out."""

import logging
from typing import Optional

from models.errors import InvalidParameter
from models.rgba_image import BufferLike, RgbaImage, buffer_length
from models.transform_params import TransformParams
from models.transform_result import TransformResult
from engines.grayscale import grayscale
from engines.posterize import compress
from engines.merge import merge_half
from utils.constants import BYTES_PER_PIXEL
from utils.metrics import compute_psnr_ssim, count_colors, Timer
from utils.presentation import PresentationSink

logger = logging.getLogger(__name__)


def _row_count(width: int, height: int, buffer: BufferLike) -> int:
    """Height implied by a buffer of whole RGBA rows, else the declared height."""
    row_bytes = width * BYTES_PER_PIXEL
    length = buffer_length(buffer)
    if row_bytes and length % row_bytes == 0:
        return length // row_bytes
    return height


def _present(image: RgbaImage, sink: Optional[PresentationSink]) -> bytes:
    data = image.flatten()
    if sink is not None:
        sink.present(image.width, image.height, data)
    return data


def apply_grayscale(
    width: int,
    height: int,
    rgba_bytes: BufferLike,
    sink: Optional[PresentationSink] = None
) -> bytes:
    """Grayscale a width x height RGBA buffer, present it and return the bytes."""
    image = RgbaImage.from_raw(width, height, rgba_bytes)
    logger.debug("grayscale %dx%d", width, height)
    return _present(grayscale(image), sink)


def apply_compression(
    width: int,
    height: int,
    rgba_bytes: BufferLike,
    quality: float,
    sink: Optional[PresentationSink] = None
) -> bytes:
    """Posterize a width x height RGBA buffer by quality, present it and return the bytes."""
    image = RgbaImage.from_raw(width, height, rgba_bytes)
    logger.debug("compress %dx%d quality=%s", width, height, quality)
    return _present(compress(image, quality), sink)


def merge_half_images(
    width: int,
    height: int,
    rgba_bytes_1: BufferLike,
    rgba_bytes_2: BufferLike,
    sink: Optional[PresentationSink] = None
) -> bytes:
    """Left half of the first buffer joined to the right half of the second."""
    image1 = RgbaImage.from_raw(width, height, rgba_bytes_1)
    image2 = RgbaImage.from_raw(width, _row_count(width, height, rgba_bytes_2), rgba_bytes_2)
    logger.debug("merge %dx%d", width, height)
    return _present(merge_half(image1, image2), sink)


def process_image(
    image1: RgbaImage,
    params: TransformParams,
    image2: Optional[RgbaImage] = None
) -> TransformResult:
    """Run one transform on decoded images and measure its effect."""
    timer = Timer()

    if params.operation == 'grayscale':
        processed = timer.measure(grayscale, image1)
    elif params.operation == 'compress':
        processed = timer.measure(compress, image1, params.quality)
    else:
        if image2 is None:
            raise InvalidParameter("merge needs a second image")
        processed = timer.measure(merge_half, image1, image2)

    metrics = compute_psnr_ssim(image1.pixels, processed.pixels)
    logger.debug(
        "%s on %dx%d took %.2f ms (PSNR %.2f dB)",
        params.operation, image1.width, image1.height, timer.elapsed_ms, metrics['psnr']
    )

    return TransformResult(
        operation=params.operation,
        source_image=image1,
        processed_image=processed,
        psnr=metrics['psnr'],
        ssim=metrics['ssim'],
        colors_before=count_colors(image1.pixels),
        colors_after=count_colors(processed.pixels),
        elapsed_ms=timer.elapsed_ms
    )
