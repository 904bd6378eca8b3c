import string

from braillepic.errors import InvalidHexFormat

# Channel values of the 6x6x6 cube (codes 16-231)
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)

CUBE_BASE = 16
CUBE_BLACK = 16
CUBE_WHITE = 231
GRAY_BASE = 232
GRAY_STEPS = 24

# Colours whose channel spread is below this are mapped onto the gray ramp
GRAYSCALE_SPREAD = 10


def _quantize_gray(r: int, g: int, b: int) -> int:
    avg = (r + g + b) // 3
    if avg < 8:
        return CUBE_BLACK
    if avg >= 238:
        return CUBE_WHITE
    step = (avg - 8) * GRAY_STEPS // 229
    return GRAY_BASE + min(step, GRAY_STEPS - 1)


def _quantize_channel(value: int) -> int:
    """Index of the nearest cube level; the lower index wins ties."""
    return min(range(len(CUBE_LEVELS)), key=lambda i: abs(value - CUBE_LEVELS[i]))


def quantize_rgb(r: int, g: int, b: int) -> int:
    """Map an 8-bit RGB colour to an ANSI-256 code in 16-255.

    The 16 system colours are never returned since terminals theme them
    freely. Near-neutral colours use the 24-step gray ramp (232-255), with
    the cube's black and white at the ends; everything else goes to the
    6x6x6 cube.
    """
    r, g, b = int(r), int(g), int(b)
    if max(r, g, b) - min(r, g, b) < GRAYSCALE_SPREAD:
        return _quantize_gray(r, g, b)
    return CUBE_BASE + 36 * _quantize_channel(r) + 6 * _quantize_channel(g) + _quantize_channel(b)


def parse_hex(text: str) -> int:
    """Parse ``#rgb``/``#rrggbb`` (the ``#`` is optional) into an ANSI-256 code."""
    digits = text[1:] if text.startswith("#") else text
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise InvalidHexFormat(f"Invalid hex colour {text!r}: expected 3 or 6 hex digits")
    if any(c not in string.hexdigits for c in digits):
        raise InvalidHexFormat(f"Invalid hex colour {text!r}: non-hex character")
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return quantize_rgb(r, g, b)
