import argparse
import logging
import sys
from pathlib import Path

from PIL import UnidentifiedImageError

from braillepic.config import CliSettings, RenderOptions, configure_logging
from braillepic.converter import image_to_braille
from braillepic.errors import BraillepicError, InvalidHexFormat
from braillepic.quantize import parse_hex

logger = logging.getLogger(__name__)


def _threshold(value: str) -> int:
    threshold = int(value)
    if not 0 <= threshold <= 255:
        raise argparse.ArgumentTypeError("threshold must be between 0 and 255")
    return threshold


def _background(value: str) -> int:
    try:
        return parse_hex(value)
    except InvalidHexFormat as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser(settings: CliSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as braille art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w", "--width", type=int, default=0, help="Output width in characters (default: terminal width)"
    )
    parser.add_argument(
        "-H", "--height", type=int, default=0, help="Output height in characters (default: terminal height)"
    )
    parser.add_argument(
        "-t", "--threshold", type=_threshold, default=20, help="Brightness threshold 0-255 (default: 20)"
    )
    parser.add_argument("--no-color", action="store_true", default=False, help="Disable ANSI colours")
    parser.add_argument(
        "--background",
        type=_background,
        default=None,
        help="Background colour as hex, e.g. 'ff0000' or '#f00' (default: none)",
    )
    parser.add_argument(
        "--dither", action="store_true", default=False, help="Apply Floyd-Steinberg dithering to the dots"
    )
    parser.add_argument("--frame", action="store_true", default=False, help="Draw a white frame around the picture")
    parser.add_argument(
        "--log-level", default=settings.log_level, help=f"Logging level (default: {settings.log_level})"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = CliSettings.from_env()
    args = build_parser(settings).parse_args(argv)
    configure_logging(args.log_level.upper())

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    try:
        options = RenderOptions(
            width=args.width,
            height=args.height,
            threshold=args.threshold,
            colour=not args.no_color,
            background=args.background,
            dither=args.dither,
            frame=args.frame,
        )
        lines = image_to_braille(image_path, options)
    except (UnidentifiedImageError, OSError):
        logger.error("Cannot decode image: %s", image_path)
        return 1
    except BraillepicError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
