# One braille character covers a 2x4 block of pixels
CELL_WIDTH = 2
CELL_HEIGHT = 4


def calculate_dimensions(
    image_width: int,
    image_height: int,
    width: int = 0,
    height: int = 0,
    max_width: int = 0,
    max_height: int = 0,
) -> tuple[int, int]:
    """Resolve the output size in characters, keeping the image aspect ratio.

    - width and height both given: returned unchanged.
    - only width: height follows from the aspect ratio (at least 1).
    - only height: width follows from the aspect ratio (at least 1).
    - neither: the largest size fitting inside max_width x max_height.
    - neither, and no usable maximum: (0, 0).

    Intermediate values are floats; results are truncated, never rounded.
    """
    if width > 0 and height > 0:
        return width, height

    if width > 0:
        # width*2 px wide -> width*2*(h/w) px tall -> /4 chars
        height = int(width * image_height / image_width / 2.0)
        return width, max(height, 1)

    if height > 0:
        # height*4 px tall -> height*4*(w/h) px wide -> /2 chars
        width = int(height * image_width / image_height * 2.0)
        return max(width, 1), height

    if max_width > 0 and max_height > 0:
        height_for_width = int(max_width * image_height / image_width / 2.0)
        if height_for_width <= max_height:
            return max_width, height_for_width
        width_for_height = int(max_height * image_width / image_height * 2.0)
        return width_for_height, max_height

    return 0, 0
