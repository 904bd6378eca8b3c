import numpy as np

from braillepic.charsets import BRAILLE
from braillepic.dither import floyd_steinberg
from braillepic.engine import CellGrid
from braillepic.sampling import block_colours, braille_patterns, sample_blocks


class BrailleEngine:
    """Rendering engine that maps each 2x4 pixel block to one braille glyph."""

    def __init__(self, threshold: int, dither: bool = False, colour: bool = True):
        self.threshold = threshold
        self.dither = dither
        self.colour = colour

    def render(self, grid: np.ndarray) -> CellGrid:
        """Convert a resampled (H, W, 3) pixel grid into characters and colours.

        With dithering on, only the glyphs come from the dithered grid; colours
        are still averaged from ``grid`` so they keep their hue. Averaging the
        dithered grid instead would turn every block gray.
        """
        blocks = sample_blocks(grid)
        glyph_blocks = sample_blocks(floyd_steinberg(grid, self.threshold)) if self.dither else blocks
        patterns = braille_patterns(glyph_blocks, self.threshold)
        chars = ["".join(BRAILLE[p] for p in row) for row in patterns]
        colours = block_colours(blocks) if self.colour else None
        return CellGrid(chars=chars, colours=colours)
