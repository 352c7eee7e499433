"""Transform result with metrics."""

from dataclasses import dataclass

from models.rgba_image import RgbaImage


@dataclass
class TransformResult:
    """Output of one transform run plus quality measurements."""

    operation: str
    source_image: RgbaImage
    processed_image: RgbaImage

    # Quality metrics (RGB, alpha ignored)
    psnr: float
    ssim: float

    # Distinct RGB colours
    colors_before: int
    colors_after: int

    # Runtime
    elapsed_ms: float
