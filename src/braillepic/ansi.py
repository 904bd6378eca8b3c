from braillepic.engine import CellGrid

ESC = "\x1b"
RESET = f"{ESC}[0m"


def fg(code: int) -> str:
    return f"{ESC}[38;5;{code}m"


def fg_bg(fg_code: int, bg_code: int) -> str:
    return f"{ESC}[38;5;{fg_code};48;5;{bg_code}m"


def format_cells(cells: CellGrid, background: int | None = None) -> list[str]:
    """Wrap each character in 256-colour escape sequences, one line per row."""
    if cells.colours is None:
        return list(cells.chars)

    out = []
    for r, line in enumerate(cells.chars):
        parts = []
        for c, char in enumerate(line):
            code = int(cells.colours[r, c])
            escape = fg(code) if background is None else fg_bg(code, background)
            parts.append(f"{escape}{char}{RESET}")
        out.append("".join(parts))
    return out


def visible_width(text: str) -> int:
    """Number of characters in text, not counting escape sequences (ESC ... m)."""
    width = 0
    in_escape = False
    for char in text:
        if char == ESC:
            in_escape = True
        elif in_escape:
            if char == "m":
                in_escape = False
        else:
            width += 1
    return width
