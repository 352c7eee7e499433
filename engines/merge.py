"""Horizontal half-merge of two images."""

from models.errors import DimensionMismatch
from models.rgba_image import RgbaImage


def split_column(width: int) -> int:
    """First column taken from the second image; odd widths give it the extra column."""
    return width // 2


def merge_half(image1: RgbaImage, image2: RgbaImage) -> RgbaImage:
    """Left half from image1, right half from image2, hard seam at width // 2."""
    if not image1.same_dimensions(image2):
        raise DimensionMismatch(image1.shape, image2.shape)

    split_x = split_column(image1.width)
    output = RgbaImage.new_blank(image1.width, image1.height)
    output.pixels[:, :split_x] = image1.pixels[:, :split_x]
    output.pixels[:, split_x:] = image2.pixels[:, split_x:]
    return output
