import numpy as np

from braillepic.sampling import luminance

# Floyd-Steinberg weights as (dx, dy, factor):
#          X   7/16
#   3/16  5/16  1/16
FLOYD_STEINBERG = (
    (1, 0, 7.0 / 16.0),
    (-1, 1, 3.0 / 16.0),
    (0, 1, 5.0 / 16.0),
    (1, 1, 1.0 / 16.0),
)


def floyd_steinberg(grid: np.ndarray, threshold: int) -> np.ndarray:
    """Binarize a (H, W, 3) grid to black/white with error diffusion.

    Pixels are visited in raster order and each one is quantized only after
    every earlier pixel has pushed its error onto it, so the loop cannot be
    reordered. Neighbours receive error on their red channel and are
    rewritten as gray. Returns a new array; ``grid`` is left untouched.
    """
    height, width = grid.shape[:2]
    pixels = grid[:, :, :3].astype(np.int64).tolist()

    for y in range(height):
        row = pixels[y]
        for x in range(width):
            r, g, b = row[x]
            lum = luminance(r, g, b)
            new = 255 if lum > threshold else 0
            error = lum - new
            row[x] = [new, new, new]

            for dx, dy, factor in FLOYD_STEINBERG:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and ny < height:
                    value = pixels[ny][nx][0] + int(error * factor)
                    value = min(255, max(0, value))
                    pixels[ny][nx] = [value, value, value]

    return np.array(pixels, dtype=np.uint8).reshape(height, width, 3)
