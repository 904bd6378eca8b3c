from pathlib import Path

import numpy as np
from PIL import Image

ImageSource = Image.Image | str | Path | np.ndarray


def load_image(image: ImageSource) -> Image.Image:
    """Open a path or wrap an array; alpha is flattened over black.

    Fully transparent pixels therefore read as black, the same as sampling
    premultiplied RGBA.
    """
    if isinstance(image, np.ndarray):
        image = Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
    elif not isinstance(image, Image.Image):
        image = Image.open(image)
        # force decoding; a truncated file raises OSError here
        image.load()

    if image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info:
        rgba = image.convert("RGBA")
        flat = Image.new("RGB", rgba.size, (0, 0, 0))
        flat.paste(rgba, mask=rgba.getchannel("A"))
        return flat
    return image.convert("RGB")


def resample(image: Image.Image, width: int, height: int) -> np.ndarray:
    """Scale to exactly width x height pixels with a Catmull-Rom (bicubic) filter.

    Returns a fresh (height, width, 3) uint8 array owned by the caller.
    """
    if image.mode != "RGB":
        image = image.convert("RGB")
    resized = image.resize((width, height), Image.BICUBIC)
    return np.array(resized, dtype=np.uint8)
