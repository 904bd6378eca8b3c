# Braille patterns: U+2800 to U+28FF (256 characters, 2x4 dot grid)
BRAILLE_BASE = 0x2800
BRAILLE = "".join(chr(i) for i in range(BRAILLE_BASE, BRAILLE_BASE + 0x100))

BRAILLE_EMPTY = BRAILLE[0x00]
BRAILLE_FULL = BRAILLE[0xFF]

# Box drawing characters used for the frame
FRAME_TOP_LEFT = "┌"
FRAME_TOP_RIGHT = "┐"
FRAME_BOTTOM_LEFT = "└"
FRAME_BOTTOM_RIGHT = "┘"
FRAME_HORIZONTAL = "─"
FRAME_VERTICAL = "│"
