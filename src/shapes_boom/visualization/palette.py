from __future__ import annotations

from typing import Callable, Dict, Tuple

import numpy as np

Color = Tuple[int, int, int]

EMPTY_COLOR: Color = (20, 20, 26)
OUTLINE_COLOR: Color = (17, 17, 17)

PALETTE: Dict[int, Color] = {
    1: (255, 0, 0),      # T red
    2: (0, 255, 0),      # O green
    3: (0, 0, 255),      # L blue
    4: (255, 165, 0),    # S orange
    5: (255, 255, 0),    # Z yellow
    6: (128, 0, 128),    # I purple
    7: (0, 255, 255),    # J cyan
}


def color_for_value(v: int) -> Color:
    if v == 0:
        return EMPTY_COLOR
    return PALETTE.get(abs(int(v)), (200, 200, 200))


def render_rgb(state: np.ndarray, cell: int = 12,
               color_for: Callable[[int], Color] = color_for_value) -> np.ndarray:
    """Rasterise a grid state into an (h*cell, w*cell, 3) uint8 image."""
    h, w = state.shape
    img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for(int(state[y, x]))
    return img
