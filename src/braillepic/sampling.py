import numpy as np

from braillepic.charsets import BRAILLE_BASE
from braillepic.dimensions import CELL_HEIGHT, CELL_WIDTH
from braillepic.quantize import quantize_rgb

# (dx, dy) inside a 2x4 block for each sample index; sample i drives bit i
# of the braille pattern:
#   0 3
#   1 5
#   2 6
#   4 7
DOT_OFFSETS = (
    (0, 0),
    (0, 1),
    (0, 2),
    (1, 0),
    (0, 3),
    (1, 1),
    (1, 2),
    (1, 3),
)
NUM_SAMPLES = len(DOT_OFFSETS)

_DX = np.array([dx for dx, _ in DOT_OFFSETS])
_DY = np.array([dy for _, dy in DOT_OFFSETS])
_BIT_WEIGHTS = 1 << np.arange(NUM_SAMPLES)

# Fill for block samples that fall outside the grid
SENTINEL = (0, 0, 0)


def luminance(r, g, b):
    """BT.601 luma truncated to an integer. Works on scalars and arrays."""
    lum = 0.299 * r + 0.587 * g + 0.114 * b
    if isinstance(lum, np.ndarray):
        return lum.astype(np.uint8)
    return int(lum)


def extract_block(grid: np.ndarray, x0: int, y0: int) -> tuple[tuple[int, int, int], ...]:
    """The 8 samples of the block whose top-left pixel is (x0, y0)."""
    height, width = grid.shape[:2]
    samples = []
    for dx, dy in DOT_OFFSETS:
        x, y = x0 + dx, y0 + dy
        if x < width and y < height:
            r, g, b = grid[y, x, :3]
            samples.append((int(r), int(g), int(b)))
        else:
            samples.append(SENTINEL)
    return tuple(samples)


def sample_blocks(grid: np.ndarray) -> np.ndarray:
    """Split a (H, W, 3) grid into blocks. Returns (rows, cols, NUM_SAMPLES, 3) uint8.

    A partial block at the right or bottom edge is padded with SENTINEL.
    """
    height, width = grid.shape[:2]
    rows = -(-height // CELL_HEIGHT)
    cols = -(-width // CELL_WIDTH)

    padded = np.full((rows * CELL_HEIGHT, cols * CELL_WIDTH, 3), SENTINEL, dtype=np.uint8)
    padded[:height, :width] = grid[:, :, :3]

    # (rows, cell_h, cols, cell_w, 3) -> (rows, cols, cell_w, cell_h, 3)
    cells = padded.reshape(rows, CELL_HEIGHT, cols, CELL_WIDTH, 3).transpose(0, 2, 3, 1, 4)
    return cells[:, :, _DX, _DY]


def block_to_braille(block, threshold: int) -> str:
    """Braille glyph with a dot for every sample brighter than threshold."""
    pattern = 0
    for i, (r, g, b) in enumerate(block):
        if luminance(r, g, b) > threshold:
            pattern |= 1 << i
    return chr(BRAILLE_BASE + pattern)


def block_to_ansi(block) -> int:
    """ANSI-256 code of the block's mean colour."""
    r = sum(s[0] for s in block) // NUM_SAMPLES
    g = sum(s[1] for s in block) // NUM_SAMPLES
    b = sum(s[2] for s in block) // NUM_SAMPLES
    return quantize_rgb(r, g, b)


def braille_patterns(blocks: np.ndarray, threshold: int) -> np.ndarray:
    """Vectorised block_to_braille. Returns (rows, cols) dot patterns 0-255."""
    samples = blocks.astype(np.float64)
    lum = luminance(samples[..., 0], samples[..., 1], samples[..., 2])
    return ((lum > threshold) * _BIT_WEIGHTS).sum(axis=-1)


def block_colours(blocks: np.ndarray) -> np.ndarray:
    """Vectorised block_to_ansi. Returns (rows, cols) uint8 ANSI codes."""
    means = blocks.astype(np.uint32).sum(axis=2) // NUM_SAMPLES
    rows, cols = means.shape[:2]
    codes = np.empty((rows, cols), dtype=np.uint8)
    for r in range(rows):
        for c in range(cols):
            codes[r, c] = quantize_rgb(*means[r, c])
    return codes
