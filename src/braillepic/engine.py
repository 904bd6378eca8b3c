from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class CellGrid:
    chars: list[str]  # one string per row
    colours: np.ndarray | None  # (rows, cols) uint8 ANSI-256 codes, or None
