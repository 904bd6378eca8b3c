import logging
from collections.abc import Mapping

from braillepic.ansi import format_cells
from braillepic.config import RenderOptions, resolve_options
from braillepic.dimensions import CELL_HEIGHT, CELL_WIDTH, calculate_dimensions
from braillepic.errors import DegenerateDimensions
from braillepic.frame import add_frame
from braillepic.resample import ImageSource, load_image, resample
from braillepic.sampler import BrailleEngine
from braillepic.terminal import get_terminal_size

logger = logging.getLogger(__name__)

# Columns and rows taken by the frame border
FRAME_MARGIN = 2


def _resolve_size(
    image_size: tuple[int, int],
    options: RenderOptions,
    terminal_size: tuple[int, int] | None,
) -> tuple[int, int]:
    width, height = options.width, options.height

    if width > 0 and height > 0:
        if options.frame:
            width = max(width - FRAME_MARGIN, 1)
            height = max(height - FRAME_MARGIN, 1)
        return width, height

    max_width, max_height = terminal_size if terminal_size is not None else get_terminal_size()
    if options.frame:
        max_width -= FRAME_MARGIN
        max_height -= FRAME_MARGIN

    width, height = calculate_dimensions(*image_size, width, height, max_width, max_height)
    if width <= 0 and height <= 0:
        raise DegenerateDimensions(
            f"Cannot fit a {image_size[0]}x{image_size[1]} image into {max_width}x{max_height} characters"
        )
    if width <= 0 or height <= 0:
        logger.debug("Clamping degenerate size %dx%d to at least one character", width, height)
        width, height = max(width, 1), max(height, 1)
    return width, height


def image_to_braille(
    image: ImageSource,
    options: RenderOptions | None = None,
    terminal_size: tuple[int, int] | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Render an image as lines of braille characters.

    ``terminal_size`` bounds the output when width and height are not both
    given; it defaults to the size of the attached terminal. ``environ`` is
    consulted for NO_COLOR and defaults to the process environment.
    """
    options = resolve_options(options or RenderOptions(), environ)
    image = load_image(image)

    width, height = _resolve_size(image.size, options, terminal_size)
    logger.debug("Rendering %dx%d image as %dx%d characters", image.width, image.height, width, height)

    grid = resample(image, width * CELL_WIDTH, height * CELL_HEIGHT)
    engine = BrailleEngine(options.threshold, dither=options.dither, colour=options.colour)
    lines = format_cells(engine.render(grid), options.background)

    if options.frame:
        return add_frame(lines, options.colour)
    return lines
