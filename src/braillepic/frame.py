from braillepic.ansi import RESET, fg, visible_width
from braillepic.charsets import (
    FRAME_BOTTOM_LEFT,
    FRAME_BOTTOM_RIGHT,
    FRAME_HORIZONTAL,
    FRAME_TOP_LEFT,
    FRAME_TOP_RIGHT,
    FRAME_VERTICAL,
)

FRAME_COLOUR = 15  # white


def add_frame(lines: list[str], colour: bool = True) -> list[str]:
    """Surround the lines with a one character box, white when colour is on."""
    if not lines:
        return []

    width = visible_width(lines[0])
    start, end = (fg(FRAME_COLOUR), RESET) if colour else ("", "")

    def border(text: str) -> str:
        return f"{start}{text}{end}"

    horizontal = FRAME_HORIZONTAL * width
    side = border(FRAME_VERTICAL)
    return [
        border(FRAME_TOP_LEFT + horizontal + FRAME_TOP_RIGHT),
        *(side + line + side for line in lines),
        border(FRAME_BOTTOM_LEFT + horizontal + FRAME_BOTTOM_RIGHT),
    ]
