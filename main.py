"""
Pixel Buffer Studio
Grayscale, posterize and half-merge RGBA images from the command line
"""

import argparse
import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pixel-buffer-studio',
        description='Apply pixel-level transforms to RGBA images.'
    )
    parser.add_argument('operation', choices=['grayscale', 'compress', 'merge'])
    parser.add_argument('inputs', nargs='*', help='input image(s); merge takes two')
    parser.add_argument('-q', '--quality', type=float, default=1.0,
                        help='posterization factor for compress (min 0.1)')
    parser.add_argument('-o', '--output', default='processed.png')
    parser.add_argument('--synthetic', action='store_true',
                        help='use generated test images instead of files')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def load_inputs(args):
    """Return (image1, image2) as RgbaImage; image2 is None unless merging."""
    from models.rgba_image import RgbaImage
    from utils.image_io import load_rgba
    from utils.test_images import generate_rgba_gradient, generate_rgba_checkerboard

    needed = 2 if args.operation == 'merge' else 1

    if args.synthetic:
        print("Generating test image...")
        images = [generate_rgba_gradient(256, 256), generate_rgba_checkerboard(256)][:needed]
    else:
        if len(args.inputs) != needed:
            raise SystemExit(f"{args.operation} needs {needed} input image(s), got {len(args.inputs)}")
        images = []
        for path in args.inputs:
            print(f"Loading: {path}")
            images.append(load_rgba(path))

    decoded = [RgbaImage.from_array(image) for image in images]
    return decoded[0], decoded[1] if needed == 2 else None


def run_cli(argv=None) -> int:
    from models.errors import PixelBufferError
    from models.transform_params import TransformParams
    from engines.pipeline import process_image
    from utils.log import setup_logging
    from utils.presentation import ImageFileSink

    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        image1, image2 = load_inputs(args)
        params = TransformParams(operation=args.operation, quality=args.quality)

        print(f"Image: {image1.width}x{image1.height}")
        if params.operation == 'compress':
            print(f"Quality: {params.quality}")

        result = process_image(image1, params, image2)
        sink = ImageFileSink(args.output)
        sink.present(result.processed_image.width, result.processed_image.height,
                     result.processed_image.flatten())
    except (PixelBufferError, ValueError) as e:
        logger.error("%s failed: %s", args.operation, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n=== Results ===")
    print(f"PSNR:      {result.psnr:.2f} dB")
    print(f"SSIM:      {result.ssim:.4f}")
    print(f"Colours:   {result.colors_before} -> {result.colors_after}")
    print(f"Time:      {result.elapsed_ms:.2f} ms")
    print(f"\nSaved: {args.output}")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
